"""src/uriparser/utils/__init__.py

Codecs built on top of the URI value type.
"""
