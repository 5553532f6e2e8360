"""
Test suite for prismic_fragments.
"""
