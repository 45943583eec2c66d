from .candidate import Candidate, to_candidate, is_wordle_word
from .state import ConstraintState, EMPTY_STATE, update_state, replay
from .predicates import fits_pred
from .scoring import score
from .suggest import filter_candidates, suggest
from .validation import validate_feedback, validate_guess, is_win

__all__ = [
    "Candidate", "to_candidate", "is_wordle_word",
    "ConstraintState", "EMPTY_STATE", "update_state", "replay",
    "fits_pred", "score", "filter_candidates", "suggest",
    "validate_feedback", "validate_guess", "is_win",
]
