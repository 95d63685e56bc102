"""
Site pages for the Showroom CMS.

Homepage configuration and its sections, the about-us page, contact
information and site-wide settings.
"""
