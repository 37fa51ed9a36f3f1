# Services package init
"""
QuickNotes — Services Layer
============================

Service Inventory:
    - NoteStore: in-memory note collection with id allocation and validation
"""
