"""
Car model catalog for the Showroom CMS.

Model pages (hero, colours, gallery, specifications) managed from the
dashboard and served to the public site once published.
"""
