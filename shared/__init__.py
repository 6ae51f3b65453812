"""
Shared kernel

Building blocks used by every ShareIt app: the error taxonomy and its DRF
exception handler, actor header parsing, page-window pagination, request
logging middleware and the unit of work.
"""
