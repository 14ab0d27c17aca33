"""The MIME Content-Transfer-Encoding header field value, in the contenttransferencoding module."""

__version__ = "0.1.0"
__all__ = ["__version__"]