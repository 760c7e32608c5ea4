# Repositories package init
"""
Journal Backend — Repositories
================================

Data access between the routes (HTTP) and the store (SQLAlchemy).

    - EntryRepository:    entries CRUD, category joined on read
    - CategoryRepository: list (by name) and create
    - CommentRepository:  list by entry, create, delete
    - MediaRepository:    list by entry, upload (with FileService), delete

Every repository is stateless: the session (and, for media, the
FileService) is passed to each call.
"""
