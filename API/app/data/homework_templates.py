"""
Canned homework-help explanations keyed by subject name.

Each template has an intro ``response``, ordered ``steps`` (order, title,
content, hint) and ``related_concepts`` (name, difficulty, description).
"""
from __future__ import annotations

HOMEWORK_TEMPLATES: dict[str, dict] = {
    "Mathematics": {
        "response": (
            "Let me help you with this math problem! First we'll analyze the question, "
            "then work step by step toward the answer."
        ),
        "steps": [
            ("Understand the problem", "Read the problem carefully and decide what you need to find.",
             "Pick out the key information and the unknowns"),
            ("Analyze the given information", "List every piece of information the problem gives you.",
             "Turn the words into mathematical expressions"),
            ("Choose a method", "Pick a suitable method for this type of problem.",
             "Consider formulas, drawing a diagram, or logical reasoning"),
            ("Carry out the calculation", "Work through the calculation using the chosen method.",
             "Watch the order of operations and the units"),
            ("Check the answer", "Make sure the answer is reasonable.",
             "Substitute the answer back into the original problem"),
        ],
        "related_concepts": [
            ("Algebra fundamentals", "beginner", "Basic operations with variables and expressions"),
            ("Solving equations", "intermediate", "Solving linear equations in one variable"),
            ("Function graphs", "intermediate", "Graphs and properties of linear functions"),
        ],
    },
    "Science": {
        "response": (
            "This is a really interesting science question! Let's use the scientific method "
            "to analyze and solve it."
        ),
        "steps": [
            ("Observe", "Look closely at the phenomenon or problem described.",
             "Pay attention to details and key features"),
            ("Form a hypothesis", "Propose a possible explanation based on what you observed.",
             "Think about the relevant scientific principles"),
            ("Design an experiment", "Plan a way to test your hypothesis.",
             "Control your variables so the experiment is reliable"),
            ("Analyze the data", "Examine the experimental results and data.",
             "Look for patterns and trends"),
            ("Draw a conclusion", "Reach a conclusion based on your analysis.",
             "Make sure the conclusion matches the evidence"),
        ],
        "related_concepts": [
            ("Scientific method", "beginner", "Observation, hypothesis, experiment and analysis"),
            ("Data analysis", "intermediate", "Reading charts and basic statistics"),
            ("Scientific principles", "intermediate", "Foundational theory of the related discipline"),
        ],
    },
    "English Language Arts": {
        "response": (
            "Let's analyze this language arts question together! I'll guide you toward a deeper "
            "understanding of the text and how its language works."
        ),
        "steps": [
            ("Understand the text", "Read carefully and understand what the text is about.",
             "Notice the theme, plot and characters"),
            ("Analyze language techniques", "Identify the rhetorical devices and techniques the author uses.",
             "Look for metaphor, symbolism and contrast"),
            ("Explore the theme", "Analyze the deeper themes and meaning of the text.",
             "Consider the author's purpose"),
            ("Connect to context", "Relate the text to its historical and cultural background.",
             "Knowing the period helps you understand the text"),
            ("Form your view", "Develop your own interpretation from the analysis.",
             "Support your view with evidence from the text"),
        ],
        "related_concepts": [
            ("Literary analysis", "intermediate", "Methods of textual analysis and literary criticism"),
            ("Rhetorical devices", "intermediate", "Metaphor, symbolism, contrast and similar techniques"),
            ("Writing craft", "advanced", "Writing argumentative and expository essays"),
        ],
    },
}

FALLBACK_TEMPLATE: dict = {
    "response": "That's a great question! Let me help you analyze and solve it.",
    "steps": [
        ("Analyze the problem", "First, let's understand the core of the problem.",
         "Identify the key information and the goal"),
        ("Make a plan", "Lay out the steps to solve the problem.",
         "Break a complex problem into simple steps"),
        ("Carry out the plan", "Follow the plan and solve the problem step by step.",
         "Keep your reasoning clear"),
        ("Check the result", "Verify the answer is correct.",
         "Make sure the answer meets the question's requirements"),
    ],
    "related_concepts": [
        ("Problem solving", "beginner", "A systematic approach to analyzing problems"),
        ("Logical thinking", "intermediate", "Basic reasoning and argumentation skills"),
    ],
}
