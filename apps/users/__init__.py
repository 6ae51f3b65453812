"""Users app package.

Holds the user directory of the sharing service: people who list items,
book them and post item requests. Every other app resolves the acting
user through `apps.users.repositories.UserDirectory`.
"""
