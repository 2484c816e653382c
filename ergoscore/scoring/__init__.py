"""Scoring module for the ergonomic risk engine.

Implements four independent posture / lifting assessments:
  REBA → Table A + Table B → Table C → activity      (1-15)
  RULA → arm/wrist branch ∥ neck/trunk branch → max  (1-8)
  OWAS → rule cascade → action category              (1-4)
  NIOSH → RWL = LC × HM × VM × DM × AM × FM × CM, LI = weight / RWL

plus shared classification, a correction advisor and a method catalogue.
"""
from ergoscore.scoring.catalogue import default_observation
from ergoscore.scoring.corrections import generate_corrections
from ergoscore.scoring.engine import assess, score
from ergoscore.scoring.estimates import merge_estimates
from ergoscore.scoring.niosh import calculate_niosh
from ergoscore.scoring.owas import calculate_owas
from ergoscore.scoring.reba import calculate_reba
from ergoscore.scoring.rula import calculate_rula

__all__ = [
    "calculate_reba",
    "calculate_rula",
    "calculate_owas",
    "calculate_niosh",
    "generate_corrections",
    "score",
    "assess",
    "merge_estimates",
    "default_observation",
]
