"""Request and upload helpers."""
