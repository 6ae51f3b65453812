"""Item requests app package.

A user who cannot find an item posts a request describing it; other users
answer by listing an item that references the request.
"""
