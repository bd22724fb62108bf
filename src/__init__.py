"""Image Gallery Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless deduplicated image gallery using AWS Lambda, S3, and DynamoDB"
)

__all__ = ["handlers", "core"]
