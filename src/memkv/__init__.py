"""
memkv - In-Memory Transactional Key/Value Store

A small key/value engine driven by single-line text commands, with nested
transaction blocks that roll back the innermost block or commit all of them.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
