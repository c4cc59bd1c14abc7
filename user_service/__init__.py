"""User account management service.

Stores user records (name, e-mail, phone and a password digest) in a
relational database and exposes create, lookup, update and delete over HTTP.
"""

__version__ = "0.1.0"
