"""
Articles app for the Showroom CMS.

Article storage and the publishing pipeline: sanitization, slug
assignment and publish-state transitions.
"""
