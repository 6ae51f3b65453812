"""Items app package.

Items are the things users list for sharing. The app also owns comments,
which a user may leave once one of their approved bookings of the item has
ended.
"""
