"""
Emotional state classification

This module maps a band power profile to one of four emotional states using
a two-tier policy: a dominance rule on relative beta/gamma power, and a
weighted score on absolute band power when no fast band dominates.
"""

import logging
from typing import Dict, Mapping, Optional, Sequence

from ..core.data_types import (
    BandPowerProfile, DecisionTier, EmotionDecision, EmotionLabel, EmotionState,
)
from ..core.config import (
    DOMINANCE_THRESHOLD, ANXIOUS_GAMMA_THRESHOLD, ANXIOUS_ALPHA_CEILING, EPSILON,
    ANXIOUS_BETA_WEIGHT, FOCUSED_GAMMA_WEIGHT, CURIOUS_ALPHA_WEIGHT,
    SCORE_WEIGHTS, LABEL_ORDER,
)


class EmotionClassifier:
    """
    Classify band powers into a discrete emotional state

    The classifier holds only its thresholds and weights, so one instance can
    be shared between threads.
    """

    def __init__(self,
                 dominance_threshold: float = DOMINANCE_THRESHOLD,
                 anxious_gamma_threshold: float = ANXIOUS_GAMMA_THRESHOLD,
                 anxious_alpha_ceiling: float = ANXIOUS_ALPHA_CEILING,
                 score_weights: Mapping[str, Mapping[str, float]] = SCORE_WEIGHTS,
                 label_order: Sequence[str] = LABEL_ORDER,
                 epsilon: float = EPSILON):
        self.dominance_threshold = dominance_threshold
        self.anxious_gamma_threshold = anxious_gamma_threshold
        self.anxious_alpha_ceiling = anxious_alpha_ceiling
        self.score_weights = score_weights
        self.labels = [EmotionLabel(name) for name in label_order]
        self.epsilon = epsilon

    @staticmethod
    def relative_powers(profile: BandPowerProfile) -> Dict[str, float]:
        """Band powers as fractions of the total (total of zero counts as 1)"""
        total = profile.total()
        if total == 0:
            total = 1.0
        return {band: power / total for band, power in profile.as_dict().items()}

    def _dominance_rule(self, r: Dict[str, float]) -> Optional[EmotionState]:
        """Tier A: applies only when beta + gamma dominate the spectrum"""
        if r["beta"] + r["gamma"] <= self.dominance_threshold:
            return None

        eps = self.epsilon
        if r["gamma"] > self.anxious_gamma_threshold and r["alpha"] < self.anxious_alpha_ceiling:
            return EmotionState(
                primary=EmotionLabel.ANXIOUS_STRESSED,
                intensity=min(1.0, r["gamma"] + ANXIOUS_BETA_WEIGHT * r["beta"]),
                confidence=min(1.0, (r["gamma"] + r["beta"]) / (r["alpha"] + r["theta"] + eps)),
            )

        if r["beta"] >= r["gamma"]:
            return EmotionState(
                primary=EmotionLabel.FOCUSED_HIGH,
                intensity=min(1.0, r["beta"] + FOCUSED_GAMMA_WEIGHT * r["gamma"]),
                confidence=min(1.0, (r["beta"] + r["gamma"]) / (r["alpha"] + r["theta"] + eps)),
            )

        return EmotionState(
            primary=EmotionLabel.CURIOUS_INTERESTED,
            intensity=min(1.0, r["gamma"] + CURIOUS_ALPHA_WEIGHT * r["alpha"]),
            confidence=min(1.0, (r["gamma"] + r["alpha"]) / (r["beta"] + r["theta"] + eps)),
        )

    def scores(self, profile: BandPowerProfile) -> Dict[str, float]:
        """Tier B label scores on absolute band power"""
        powers = profile.as_dict()
        return {
            label.value: sum(weight * powers[band]
                             for band, weight in self.score_weights[label.value].items())
            for label in self.labels
        }

    def _weighted_score(self, scores: Dict[str, float]) -> EmotionState:
        """
        Tier B: highest score wins, earlier labels win ties

        Intensity is not floored at zero, so a profile with negative powers
        can produce a negative intensity.
        """
        values = [scores[label.value] for label in self.labels]
        best = max(range(len(values)), key=lambda i: values[i])
        max_score = values[best]

        score_sum = sum(values)
        if score_sum <= 0:
            score_sum = 1.0

        return EmotionState(
            primary=self.labels[best],
            intensity=min(1.0, max_score),
            confidence=min(1.0, max_score / score_sum),
        )

    def decide(self, profile: BandPowerProfile) -> EmotionDecision:
        """
        Classify a profile and report which tier decided

        Args:
            profile: Band powers from the current window

        Returns:
            EmotionDecision: tier, state, and the evidence the tier used
        """
        r = self.relative_powers(profile)
        state = self._dominance_rule(r)
        if state is not None:
            decision = EmotionDecision(DecisionTier.DOMINANCE, state, r)
        else:
            scores = self.scores(profile)
            decision = EmotionDecision(DecisionTier.WEIGHTED_SCORE,
                                       self._weighted_score(scores), scores)

        logging.debug(f"Emotion decision: {decision.tier.value} -> "
                      f"{decision.state.primary.value} "
                      f"(intensity {decision.state.intensity:.3f}, "
                      f"confidence {decision.state.confidence:.3f})")
        return decision

    def classify(self, profile: BandPowerProfile) -> EmotionState:
        """Classify a profile into an EmotionState"""
        return self.decide(profile).state
