# -*- coding: utf-8 -*-
"""
Catalog enrichment for marketplace listings.

Fills missing product fields from raw text and builds amazon / flipkart /
meesho / myntra listing variants.
"""
