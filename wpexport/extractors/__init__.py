"""
Extractors for decoded WordPress exports.

This subpackage classifies feed items by post type, pulls the typed
fields out of them and collects the channel level categories and tags
into the :class:`~wpexport.models.website.WebsiteInfo` aggregate.
"""
