"""
News articles ("notícias"): public listing/reading, admin create/delete.
"""
