"""
Adapter implementations for the itinerary search engine.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of storage backends, indexing and algorithms.
"""
