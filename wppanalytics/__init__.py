"""Terminal reports of WhatsApp Business message and template analytics."""

__version__ = "0.1.0"

__all__ = ["__version__"]