"""
Object storage for uploaded media.

Presigned upload URLs, public URL mapping and best-effort deletion
against an S3-compatible bucket (Cloudflare R2).
"""
