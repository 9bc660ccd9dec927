"""Currency conversion metadata: rate types and provider contexts."""
