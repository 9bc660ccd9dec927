"""Monetary domain package.

This package contains the Currency and Locale value types, the currency provider
protocols and the CurrencyRegistry that resolves currencies by code or locale.
"""
