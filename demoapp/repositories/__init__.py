"""
Persistence adapters.

``json_storage`` reads the backing JSON file (it is never written by the
service); ``memory_store`` holds the mutable record set the service owns.
"""
