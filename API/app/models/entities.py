import uuid
from datetime import date, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    grade_level: Mapped[str] = mapped_column(String(32), nullable=False)
    total_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    pet_name: Mapped[str] = mapped_column(String(64), nullable=False, default="Buddy")
    pet_type: Mapped[str] = mapped_column(String(32), nullable=False, default="dragon")
    pet_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class Subject(Base):
    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    grade_level: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Topic(Base):
    __tablename__ = "topics"
    __table_args__ = (Index("idx_topics_subject_id", "subject_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject_id: Mapped[int] = mapped_column(ForeignKey("subjects.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (
        Index("idx_questions_topic_id", "topic_id"),
        Index("idx_questions_exam_type", "exam_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(ForeignKey("topics.id"), nullable=False)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_type: Mapped[str] = mapped_column(String(32), nullable=False)  # multiple_choice | short_answer | essay
    options: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON-encoded list, multiple_choice only
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    exam_type: Mapped[str | None] = mapped_column(String(16), nullable=True)  # SAT | ACT | AP | STATE | GENERAL
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class StudentAttempt(Base):
    __tablename__ = "student_attempts"
    __table_args__ = (
        Index("idx_student_attempts_student_id", "student_id"),
        Index("idx_student_attempts_question_id", "question_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    question_id: Mapped[int] = mapped_column(ForeignKey("questions.id"), nullable=False)
    student_answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    time_spent: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    attempt_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class StudySession(Base):
    __tablename__ = "study_sessions"
    __table_args__ = (Index("idx_study_sessions_student_id", "student_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    session_type: Mapped[str] = mapped_column(String(32), nullable=False)  # practice | exam | review
    subject_id: Mapped[int | None] = mapped_column(ForeignKey("subjects.id"), nullable=True)
    topic_id: Mapped[int | None] = mapped_column(ForeignKey("topics.id"), nullable=True)
    questions_answered: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    points_earned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    session_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class UsageLimit(Base):
    __tablename__ = "usage_limits"
    __table_args__ = (
        UniqueConstraint("student_id", "feature_type", name="uq_usage_limits_student_feature"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    feature_type: Mapped[str] = mapped_column(String(64), nullable=False)
    daily_usage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monthly_usage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_reset_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_premium: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class HomeworkHelpSession(Base):
    __tablename__ = "homework_help_sessions"
    __table_args__ = (
        Index("idx_homework_help_student_created", "student_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_image: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    subject: Mapped[str] = mapped_column(String(64), nullable=False)
    question_type: Mapped[str] = mapped_column(String(32), nullable=False, default="text")
    ai_response: Mapped[str] = mapped_column(Text, nullable=False)
    steps_guidance: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    related_concepts: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    student_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class DiagnosticTest(Base):
    __tablename__ = "diagnostic_tests"
    __table_args__ = (Index("idx_diagnostic_tests_student_id", "student_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    subject: Mapped[str] = mapped_column(String(64), nullable=False)
    test_type: Mapped[str] = mapped_column(String(32), nullable=False, default="adaptive")
    questions_answered: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    responses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    ability_estimate: Mapped[float | None] = mapped_column(Float, nullable=True)
    recommended_topics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    test_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class KnowledgeNode(Base):
    __tablename__ = "knowledge_graph"
    __table_args__ = (
        Index("idx_knowledge_graph_subject", "subject"),
        Index("idx_knowledge_graph_topic", "topic"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject: Mapped[str] = mapped_column(String(64), nullable=False)
    topic: Mapped[str] = mapped_column(String(128), nullable=False)
    prerequisite_topics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    related_topics: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    learning_objectives: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    difficulty_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    mastery_threshold: Mapped[float] = mapped_column(Float, nullable=False, default=0.8)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class KnowledgeMastery(Base):
    __tablename__ = "student_knowledge_mastery"
    __table_args__ = (
        UniqueConstraint("student_id", "knowledge_node_id", name="uq_knowledge_mastery_student_node"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    knowledge_node_id: Mapped[int] = mapped_column(
        ForeignKey("knowledge_graph.id", ondelete="CASCADE"), nullable=False
    )
    mastery_level: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    confidence_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    last_practiced: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    practice_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class LearningPath(Base):
    __tablename__ = "learning_paths"
    __table_args__ = (Index("idx_learning_paths_student_subject", "student_id", "subject"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    subject: Mapped[str] = mapped_column(String(64), nullable=False)
    path_name: Mapped[str] = mapped_column(String(128), nullable=False)
    target_goals: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    path_structure: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    current_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    estimated_completion_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # minutes
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class LearningGoal(Base):
    __tablename__ = "learning_goals"
    __table_args__ = (Index("idx_learning_goals_student_id", "student_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    goal_type: Mapped[str] = mapped_column(String(32), nullable=False)  # exam_score | topic_mastery | weekly_practice
    target_value: Mapped[str] = mapped_column(String(64), nullable=False)
    current_value: Mapped[str] = mapped_column(String(64), nullable=False, default="0")
    target_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class PetItem(Base):
    __tablename__ = "pet_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)  # food | toy | accessory
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    unlock_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class StudentPetItem(Base):
    __tablename__ = "student_pet_items"
    __table_args__ = (Index("idx_student_pet_items_student_id", "student_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    item_id: Mapped[int] = mapped_column(ForeignKey("pet_items.id"), nullable=False)
    purchased_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
