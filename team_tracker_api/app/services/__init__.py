"""
Service layer abstraction.

Each service owns one in‑memory collection of records together with
its id generation rule.  Services are instantiated by the application
factory and handed to the API handlers through dependencies, so tests
can build a fresh application with fresh stores at any time.
"""
