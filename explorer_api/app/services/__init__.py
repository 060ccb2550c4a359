"""
Service layer abstraction.

Each service encapsulates the logic for one resource family on top of
a ``DocumentStore``: read the document, filter and paginate, and for
writes mutate and save it.  Route handlers stay thin and the store can
be swapped for an in-memory one in tests.
"""
