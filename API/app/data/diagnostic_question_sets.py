"""
Fixed diagnostic question sets keyed by subject name.

The client grades each response against ``correct_answer`` and submits
``isCorrect`` plus ``topic`` back; subjects without a set get an empty test.
"""
from __future__ import annotations

DIAGNOSTIC_SETS: dict[str, list[dict]] = {
    "Mathematics": [
        {
            "id": 1,
            "question": "What is the value of x in the equation 2x + 5 = 13?",
            "type": "multiple_choice",
            "options": ["x = 3", "x = 4", "x = 5", "x = 6"],
            "correct_answer": "x = 4",
            "difficulty": 1,
            "topic": "Algebra Basics",
        },
        {
            "id": 2,
            "question": "If y = 3x - 2, what is the value of y when x = 5?",
            "type": "multiple_choice",
            "options": ["y = 11", "y = 13", "y = 15", "y = 17"],
            "correct_answer": "y = 13",
            "difficulty": 1,
            "topic": "Linear Equations",
        },
        {
            "id": 3,
            "question": "What is the slope of the line passing through points (2, 3) and (4, 7)?",
            "type": "multiple_choice",
            "options": ["slope = 1", "slope = 2", "slope = 3", "slope = 4"],
            "correct_answer": "slope = 2",
            "difficulty": 2,
            "topic": "Linear Equations",
        },
    ],
    "Science": [
        {
            "id": 4,
            "question": "What is the chemical symbol for water?",
            "type": "multiple_choice",
            "options": ["H2O", "CO2", "NaCl", "O2"],
            "correct_answer": "H2O",
            "difficulty": 1,
            "topic": "Basic Chemistry",
        },
        {
            "id": 5,
            "question": "What is the process by which plants make their own food?",
            "type": "multiple_choice",
            "options": ["Respiration", "Photosynthesis", "Digestion", "Fermentation"],
            "correct_answer": "Photosynthesis",
            "difficulty": 2,
            "topic": "Biology",
        },
    ],
}


def get_diagnostic_set(subject: str) -> list[dict]:
    return [dict(q) for q in DIAGNOSTIC_SETS.get(subject, [])]
