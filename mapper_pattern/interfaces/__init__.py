"""
Interfaces layer package.

Contains presentation models, view-models and views.
No business logic belongs here: view-models call use cases
and map their results into render-ready models.
"""
