"""
Application Layer

Use-case services that orchestrate domain objects and stores:
- services/: one application service per component (parties, guests,
  votes, results, user profiles) plus their request/response models
- guards.py: shared ownership and lookup rules
"""
