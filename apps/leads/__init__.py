"""
Contact leads for the Showroom CMS.

Public contact form submissions, protected by reCAPTCHA, and their
follow-up status in the admin dashboard.
"""
