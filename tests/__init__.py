"""Root test package; subdirectories below it are namespace packages."""
