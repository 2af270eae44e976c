"""
Core business logic modules for jobmatch.

Submodules:
- matching: Job-candidate scoring and ranking
- profile: Skill suggestions and profile analysis
"""
