"""
Seed catalog loaded into an empty database on startup: subjects, Mathematics
topics, sample practice questions, pet shop items and knowledge-graph nodes.

Topic and question rows reference their parent by position (1-based) in the
lists below; the bootstrap resolves those to real ids at insert time.
"""
from __future__ import annotations

SUBJECTS = [
    {"name": "Mathematics", "grade_level": "K-12", "description": "Algebra, Geometry, Calculus, Statistics"},
    {"name": "English Language Arts", "grade_level": "K-12", "description": "Reading, Writing, Grammar, Literature"},
    {"name": "Science", "grade_level": "K-12", "description": "Biology, Chemistry, Physics, Earth Science"},
    {"name": "Social Studies", "grade_level": "K-12", "description": "History, Geography, Civics, Economics"},
]

# subject: position in SUBJECTS
TOPICS = [
    {"subject": 1, "name": "Algebra Basics", "description": "Variables, equations, and basic operations", "difficulty_level": 1},
    {"subject": 1, "name": "Linear Equations", "description": "Solving linear equations and graphing", "difficulty_level": 2},
    {"subject": 1, "name": "Quadratic Functions", "description": "Parabolas, factoring, and quadratic formula", "difficulty_level": 3},
    {"subject": 1, "name": "Geometry", "description": "Shapes, angles, and spatial reasoning", "difficulty_level": 2},
    {"subject": 1, "name": "Statistics", "description": "Data analysis, probability, and distributions", "difficulty_level": 3},
]

# topic: position in TOPICS
QUESTIONS = [
    {
        "topic": 1,
        "question_text": "What is the value of x in the equation 2x + 5 = 13?",
        "question_type": "multiple_choice",
        "options": ["x = 3", "x = 4", "x = 5", "x = 6"],
        "correct_answer": "x = 4",
        "explanation": "To solve 2x + 5 = 13, subtract 5 from both sides: 2x = 8, then divide by 2: x = 4",
        "difficulty_level": 1,
        "points": 10,
        "exam_type": "GENERAL",
    },
    {
        "topic": 1,
        "question_text": "If y = 3x - 2, what is the value of y when x = 5?",
        "question_type": "multiple_choice",
        "options": ["y = 11", "y = 13", "y = 15", "y = 17"],
        "correct_answer": "y = 13",
        "explanation": "Substitute x = 5 into the equation: y = 3(5) - 2 = 15 - 2 = 13",
        "difficulty_level": 1,
        "points": 10,
        "exam_type": "SAT",
    },
    {
        "topic": 2,
        "question_text": "What is the slope of the line passing through points (2, 3) and (4, 7)?",
        "question_type": "multiple_choice",
        "options": ["slope = 1", "slope = 2", "slope = 3", "slope = 4"],
        "correct_answer": "slope = 2",
        "explanation": "Slope = (y2 - y1)/(x2 - x1) = (7 - 3)/(4 - 2) = 4/2 = 2",
        "difficulty_level": 2,
        "points": 15,
        "exam_type": "SAT",
    },
    {
        "topic": 2,
        "question_text": "Solve for x: 4x - 7 = 9",
        "question_type": "short_answer",
        "options": None,
        "correct_answer": "4",
        "explanation": "Add 7 to both sides: 4x = 16, then divide by 4: x = 4",
        "difficulty_level": 1,
        "points": 10,
        "exam_type": "GENERAL",
    },
]

PET_ITEMS = [
    {"name": "Apple", "type": "food", "cost": 5, "description": "A healthy snack for your pet", "unlock_level": 1},
    {"name": "Ball", "type": "toy", "cost": 10, "description": "A fun toy to play with", "unlock_level": 1},
    {"name": "Crown", "type": "accessory", "cost": 50, "description": "A royal crown for your pet", "unlock_level": 3},
    {"name": "Magic Wand", "type": "toy", "cost": 100, "description": "A magical wand for advanced pets", "unlock_level": 5},
]

KNOWLEDGE_NODES = [
    {
        "subject": "Mathematics",
        "topic": "Basic Arithmetic",
        "prerequisite_topics": [],
        "related_topics": ["Fractions", "Decimals", "Algebra Basics"],
        "difficulty_level": 1,
        "description": "Basic addition, subtraction, multiplication, and division",
        "learning_objectives": ["Master basic operations", "Understand number properties"],
    },
    {
        "subject": "Mathematics",
        "topic": "Algebra Basics",
        "prerequisite_topics": ["Basic Arithmetic"],
        "related_topics": ["Linear Equations", "Quadratic Functions"],
        "difficulty_level": 2,
        "description": "Variables, expressions, and basic algebraic operations",
        "learning_objectives": ["Understand variables", "Solve simple equations"],
    },
    {
        "subject": "Mathematics",
        "topic": "Linear Equations",
        "prerequisite_topics": ["Algebra Basics"],
        "related_topics": ["Quadratic Functions", "Graphing"],
        "difficulty_level": 2,
        "description": "Solving and graphing linear equations",
        "learning_objectives": ["Solve linear equations", "Graph linear functions"],
    },
    {
        "subject": "Mathematics",
        "topic": "Quadratic Functions",
        "prerequisite_topics": ["Linear Equations", "Algebra Basics"],
        "related_topics": ["Polynomials", "Graphing"],
        "difficulty_level": 3,
        "description": "Quadratic equations, factoring, and the quadratic formula",
        "learning_objectives": ["Factor quadratics", "Use quadratic formula", "Graph parabolas"],
    },
    {
        "subject": "Science",
        "topic": "Basic Chemistry",
        "prerequisite_topics": [],
        "related_topics": ["Periodic Table", "Chemical Reactions"],
        "difficulty_level": 2,
        "description": "Atoms, molecules, and basic chemical concepts",
        "learning_objectives": ["Understand atomic structure", "Identify elements"],
    },
    {
        "subject": "Science",
        "topic": "Physics Basics",
        "prerequisite_topics": ["Basic Arithmetic"],
        "related_topics": ["Motion", "Forces", "Energy"],
        "difficulty_level": 2,
        "description": "Basic physics concepts and measurements",
        "learning_objectives": ["Understand motion", "Calculate forces"],
    },
]

DEMO_STUDENT = {
    "username": "demo_student",
    "email": "demo@example.com",
    "password": "demo123",
    "grade_level": "9th Grade",
}
