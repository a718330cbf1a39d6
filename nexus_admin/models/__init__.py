"""
Models module - document shapes, closed value sets and derived fields.

One module per entity. Each one defines:
- the enumerated values the entity accepts
- ``new_*`` builders that fill store-side defaults
- ``before_save`` hooks run by the service layer on every write
- read-time virtuals (``is_currently_active``, ``can_apply`` ...)

Request validation lives in ``nexus_admin.schemas``; these modules only
describe what a stored document looks like.
"""
