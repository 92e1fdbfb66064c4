from core.questions.ranking import (
    apply_vote,
    vote_deltas,
    popularity_score,
    frequency_distribution,
    recent_since,
)

__all__ = ['apply_vote', 'vote_deltas', 'popularity_score', 'frequency_distribution', 'recent_since']
