"""
Pydantic schema definitions for API payloads.

Each domain (people, projects, tasks) defines its own models for
request and response bodies.  Request models only describe the fields
an endpoint reads; anything else in the body is ignored.
"""
