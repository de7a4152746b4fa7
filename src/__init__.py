"""Media Asset Proxy Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless Cloudinary asset proxy using AWS Lambda, plus its HTTP client"
)

__all__ = ["handlers", "core", "client"]
