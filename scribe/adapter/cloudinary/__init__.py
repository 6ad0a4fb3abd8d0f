"""Cloudinary media adapter."""

from .client import CloudinaryMediaUploader, MockMediaUploader, sign_params

__all__ = ["CloudinaryMediaUploader", "MockMediaUploader", "sign_params"]
