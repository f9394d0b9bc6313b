"""
Services for listing, searching, launching and exporting Cursor's recent folders.
"""
