# Services package init
"""
Journal Backend — Services
============================

    - FileService: upload storage, cleanup and lookup for served files
"""
