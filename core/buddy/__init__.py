from core.buddy.matching import (
    BuddyCandidate,
    BuddySearchResult,
    CandidateStats,
    rank_buddies,
    pair_key,
)

__all__ = ['BuddyCandidate', 'BuddySearchResult', 'CandidateStats', 'rank_buddies', 'pair_key']
