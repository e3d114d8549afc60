"""Weighted aggregation of metric scores and verdict classification."""
from dataclasses import dataclass

import config

LABEL_DESCRIPTIONS = {
    'high': "HIGH PLAGIARISM - Very likely copied",
    'moderate': "MODERATE PLAGIARISM - Suspicious similarity",
    'low': "LOW PLAGIARISM - Some similar patterns",
    'minimal': "MINIMAL SIMILARITY - Likely original",
}


@dataclass(frozen=True)
class ComparisonResult:
    token_seq: float
    structure: float
    ngram: float
    frequency: float
    edit_distance: float
    overall: float
    label: str

    @property
    def is_suspicious(self):
        return self.label != config.DEFAULT_LABEL

    def scores(self):
        """Return the five metric scores keyed by metric name."""
        return {
            'token_seq': self.token_seq,
            'structure': self.structure,
            'ngram': self.ngram,
            'frequency': self.frequency,
            'edit_distance': self.edit_distance,
        }

    def as_dict(self):
        data = self.scores()
        data['overall'] = self.overall
        data['label'] = self.label
        return data


def overall_score(scores, weights=None):
    """
    Combine metric scores into one weighted score.

    Args:
        scores (dict): Metric name -> score in [0, 1]
        weights (dict, optional): Metric name -> weight, defaults to config.WEIGHTS

    Returns:
        float: Weighted score in [0, 1]
    """
    if weights is None:
        weights = config.WEIGHTS
    total = sum(weight * scores[name] for name, weight in weights.items())
    # Float rounding can push a perfect match slightly past 1.0
    return min(max(total, 0.0), 1.0)


def classify(score):
    """Map an overall score to 'high', 'moderate', 'low' or 'minimal'."""
    for lower_bound, label in config.THRESHOLDS:
        if score >= lower_bound:
            return label
    return config.DEFAULT_LABEL


def build_result(scores):
    """Aggregate a metric score dict into a ComparisonResult."""
    overall = overall_score(scores)
    return ComparisonResult(
        token_seq=scores['token_seq'],
        structure=scores['structure'],
        ngram=scores['ngram'],
        frequency=scores['frequency'],
        edit_distance=scores['edit_distance'],
        overall=overall,
        label=classify(overall),
    )
