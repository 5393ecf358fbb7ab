"""Suggestion text for each progress trend."""

from __future__ import annotations

from hairsnap.models.progress import ProgressRecord, ProgressTrend

URGENT_DECLINE_THRESHOLD = -10.0

IMPROVING_SUGGESTIONS = (
    "Continue your current hair care routine, it's showing positive results!",
    "Maintain a balanced diet rich in vitamins and minerals for continued improvement.",
    "Keep stress levels low to maintain your hair health progress.",
)

STABLE_SUGGESTIONS = (
    "Your hair density appears stable - maintain your current routine.",
    "Consider adding a scalp massage to your routine to stimulate blood flow.",
    "Stay hydrated and ensure you're getting enough protein in your diet.",
)

URGENT_DECLINE_SUGGESTIONS = (
    "Consider consulting with a dermatologist about your hair loss.",
    "Check if any medications you're taking might contribute to hair loss.",
    "Try reducing heat styling and chemical treatments.",
    "Look into minoxidil or other over-the-counter treatments.",
)

MODERATE_DECLINE_SUGGESTIONS = (
    "Try incorporating a scalp massage into your routine to stimulate follicles.",
    "Consider a biotin supplement after consulting with your doctor.",
    "Reduce stress through exercise, meditation, or other relaxation techniques.",
)

DATA_COLLECTION_SUGGESTIONS = (
    "Take photos consistently to gather more data for personalized recommendations.",
    "Ensure good lighting and consistent positioning for more accurate analysis.",
    "Track for at least 3 months to see meaningful patterns in hair loss or growth.",
)


def generate_suggestions(record: ProgressRecord) -> list[str]:
    """Return suggestions for a progress record, most important first."""
    if record.trend == ProgressTrend.IMPROVING:
        return list(IMPROVING_SUGGESTIONS)
    if record.trend == ProgressTrend.STABLE:
        return list(STABLE_SUGGESTIONS)
    if record.trend == ProgressTrend.DECLINING:
        if record.percent_change is not None and record.percent_change < URGENT_DECLINE_THRESHOLD:
            return list(URGENT_DECLINE_SUGGESTIONS)
        return list(MODERATE_DECLINE_SUGGESTIONS)
    return list(DATA_COLLECTION_SUGGESTIONS)
