"""
Breed compatibility scoring engine.

Responsibilities:
- Accept a prospective owner's lifestyle preferences.
- Score each breed with seven independent, bounded sub-scorers.
- Combine sub-scores into a 0-100 total with ordered match reasons.
- Rank a breed collection by total score.
"""
