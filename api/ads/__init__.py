"""
Advertisements: public best-ad selection per slot, admin create/list/delete.
"""
