"""Overtone filter: drops octave doublings from large chords."""

from collections.abc import Sequence

import numpy as np

from chordstaff.logger_config import logger

SEMITONES_PER_OCTAVE = 12

#: Chords this small are never treated as carrying overtones.
MAX_UNFILTERED_SIZE = 3


def filter_overtones(raw: Sequence[int]) -> list[int]:
    """
    Keep only the first occurrence of every pitch class in a large chord.

    This is a heuristic, not harmonic analysis: any repeated pitch class in
    a chord of more than three notes is assumed to be the same note doubled
    at another octave. Dyads and triads are returned unchanged.

    Args:
        raw: Half-tone offsets from the reference pitch, in any order.

    Returns:
        The surviving offsets, in their original order.
    """
    pitches = list(raw)
    if len(pitches) <= MAX_UNFILTERED_SIZE:
        return pitches

    # Reduce before numpy sees the values so arbitrarily large ints stay exact.
    classes = np.array([pitch % SEMITONES_PER_OCTAVE for pitch in pitches])
    _, first_seen = np.unique(classes, return_index=True)
    kept = [pitches[i] for i in np.sort(first_seen)]

    if len(kept) < len(pitches):
        logger.debug("Dropped %d overtone(s) from %s", len(pitches) - len(kept), pitches)
    return kept
