from __future__ import annotations

from dataclasses import asdict, dataclass

from app.data.homework_templates import FALLBACK_TEMPLATE, HOMEWORK_TEMPLATES


@dataclass(frozen=True)
class HelpStep:
    order: int
    title: str
    content: str
    hint: str


@dataclass(frozen=True)
class RelatedConcept:
    name: str
    difficulty: str
    description: str


@dataclass(frozen=True)
class HomeworkResponse:
    response: str
    steps: list[HelpStep]
    related_concepts: list[RelatedConcept]

    def steps_payload(self) -> list[dict]:
        return [asdict(step) for step in self.steps]

    def concepts_payload(self) -> list[dict]:
        return [asdict(concept) for concept in self.related_concepts]


def respond(subject_name: str, question_text: str) -> HomeworkResponse:
    """Look up the canned explanation for a subject.

    ``question_text`` is only kept by the caller for history; it is not read here.
    Usage limits are the caller's concern.
    """
    template = HOMEWORK_TEMPLATES.get(subject_name, FALLBACK_TEMPLATE)
    return HomeworkResponse(
        response=template["response"],
        steps=[
            HelpStep(order=index, title=title, content=content, hint=hint)
            for index, (title, content, hint) in enumerate(template["steps"], start=1)
        ],
        related_concepts=[
            RelatedConcept(name=name, difficulty=difficulty, description=description)
            for name, difficulty, description in template["related_concepts"]
        ],
    )
