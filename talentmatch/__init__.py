"""TalentMatch: AI resume assistance and candidate matching.

Candidates get model-written summaries and bullet rewrites; recruiters compare
stored candidate profiles against a free-text role description scored by a
locally hosted Ollama model.
"""

__version__ = "0.1.0"
