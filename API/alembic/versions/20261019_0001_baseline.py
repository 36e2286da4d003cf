"""baseline tutoring schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _student_fk() -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["student_id"], ["students.id"], ondelete="CASCADE")


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("grade_level", sa.String(length=32), nullable=False),
        sa.Column("total_points", sa.Integer(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("pet_name", sa.String(length=64), nullable=False),
        sa.Column("pet_type", sa.String(length=32), nullable=False),
        sa.Column("pet_level", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("grade_level", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["subject_id"], ["subjects.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_topics_subject_id", "topics", ["subject_id"], unique=False)

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_type", sa.String(length=32), nullable=False),
        sa.Column("options", sa.Text(), nullable=True),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.Integer(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("exam_type", sa.String(length=16), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_topic_id", "questions", ["topic_id"], unique=False)
    op.create_index("idx_questions_exam_type", "questions", ["exam_type"], unique=False)

    op.create_table(
        "student_attempts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("student_answer", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("time_spent", sa.Integer(), nullable=True),
        sa.Column("attempt_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        _student_fk(),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_student_attempts_student_id", "student_attempts", ["student_id"], unique=False)
    op.create_index("idx_student_attempts_question_id", "student_attempts", ["question_id"], unique=False)

    op.create_table(
        "study_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("session_type", sa.String(length=32), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=True),
        sa.Column("topic_id", sa.Integer(), nullable=True),
        sa.Column("questions_answered", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("points_earned", sa.Integer(), nullable=False),
        sa.Column("session_duration", sa.Integer(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _student_fk(),
        sa.ForeignKeyConstraint(["subject_id"], ["subjects.id"]),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_study_sessions_student_id", "study_sessions", ["student_id"], unique=False)

    op.create_table(
        "usage_limits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("feature_type", sa.String(length=64), nullable=False),
        sa.Column("daily_usage", sa.Integer(), nullable=False),
        sa.Column("monthly_usage", sa.Integer(), nullable=False),
        sa.Column("last_reset_date", sa.Date(), nullable=False),
        sa.Column("is_premium", sa.Boolean(), nullable=False),
        _student_fk(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("student_id", "feature_type", name="uq_usage_limits_student_feature"),
    )

    op.create_table(
        "homework_help_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_image", sa.LargeBinary(), nullable=True),
        sa.Column("subject", sa.String(length=64), nullable=False),
        sa.Column("question_type", sa.String(length=32), nullable=False),
        sa.Column("ai_response", sa.Text(), nullable=False),
        sa.Column("steps_guidance", sa.JSON(), nullable=False),
        sa.Column("related_concepts", sa.JSON(), nullable=False),
        sa.Column("student_rating", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        _student_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_homework_help_student_created",
        "homework_help_sessions",
        ["student_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "diagnostic_tests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("subject", sa.String(length=64), nullable=False),
        sa.Column("test_type", sa.String(length=32), nullable=False),
        sa.Column("questions_answered", sa.JSON(), nullable=False),
        sa.Column("responses", sa.JSON(), nullable=False),
        sa.Column("ability_estimate", sa.Float(), nullable=True),
        sa.Column("recommended_topics", sa.JSON(), nullable=False),
        sa.Column("test_duration", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _student_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_diagnostic_tests_student_id", "diagnostic_tests", ["student_id"], unique=False)

    op.create_table(
        "knowledge_graph",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("subject", sa.String(length=64), nullable=False),
        sa.Column("topic", sa.String(length=128), nullable=False),
        sa.Column("prerequisite_topics", sa.JSON(), nullable=False),
        sa.Column("related_topics", sa.JSON(), nullable=False),
        sa.Column("learning_objectives", sa.JSON(), nullable=False),
        sa.Column("difficulty_level", sa.Integer(), nullable=False),
        sa.Column("mastery_threshold", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_knowledge_graph_subject", "knowledge_graph", ["subject"], unique=False)
    op.create_index("idx_knowledge_graph_topic", "knowledge_graph", ["topic"], unique=False)

    op.create_table(
        "student_knowledge_mastery",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("knowledge_node_id", sa.Integer(), nullable=False),
        sa.Column("mastery_level", sa.Float(), nullable=False),
        sa.Column("confidence_score", sa.Float(), nullable=False),
        sa.Column("last_practiced", sa.DateTime(timezone=True), nullable=True),
        sa.Column("practice_count", sa.Integer(), nullable=False),
        sa.Column("correct_count", sa.Integer(), nullable=False),
        _student_fk(),
        sa.ForeignKeyConstraint(["knowledge_node_id"], ["knowledge_graph.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("student_id", "knowledge_node_id", name="uq_knowledge_mastery_student_node"),
    )

    op.create_table(
        "learning_paths",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("subject", sa.String(length=64), nullable=False),
        sa.Column("path_name", sa.String(length=128), nullable=False),
        sa.Column("target_goals", sa.JSON(), nullable=False),
        sa.Column("path_structure", sa.JSON(), nullable=False),
        sa.Column("current_position", sa.Integer(), nullable=False),
        sa.Column("estimated_completion_time", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        _student_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_learning_paths_student_subject", "learning_paths", ["student_id", "subject"], unique=False
    )

    op.create_table(
        "learning_goals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("goal_type", sa.String(length=32), nullable=False),
        sa.Column("target_value", sa.String(length=64), nullable=False),
        sa.Column("current_value", sa.String(length=64), nullable=False),
        sa.Column("target_date", sa.Date(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        _student_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_learning_goals_student_id", "learning_goals", ["student_id"], unique=False)

    op.create_table(
        "pet_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("unlock_level", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "student_pet_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("purchased_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        _student_fk(),
        sa.ForeignKeyConstraint(["item_id"], ["pet_items.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_student_pet_items_student_id", "student_pet_items", ["student_id"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_student_pet_items_student_id", table_name="student_pet_items")
    op.drop_table("student_pet_items")
    op.drop_table("pet_items")

    op.drop_index("idx_learning_goals_student_id", table_name="learning_goals")
    op.drop_table("learning_goals")

    op.drop_index("idx_learning_paths_student_subject", table_name="learning_paths")
    op.drop_table("learning_paths")

    op.drop_table("student_knowledge_mastery")
    op.drop_index("idx_knowledge_graph_topic", table_name="knowledge_graph")
    op.drop_index("idx_knowledge_graph_subject", table_name="knowledge_graph")
    op.drop_table("knowledge_graph")

    op.drop_index("idx_diagnostic_tests_student_id", table_name="diagnostic_tests")
    op.drop_table("diagnostic_tests")

    op.drop_index("idx_homework_help_student_created", table_name="homework_help_sessions")
    op.drop_table("homework_help_sessions")

    op.drop_table("usage_limits")

    op.drop_index("idx_study_sessions_student_id", table_name="study_sessions")
    op.drop_table("study_sessions")

    op.drop_index("idx_student_attempts_question_id", table_name="student_attempts")
    op.drop_index("idx_student_attempts_student_id", table_name="student_attempts")
    op.drop_table("student_attempts")

    op.drop_index("idx_questions_exam_type", table_name="questions")
    op.drop_index("idx_questions_topic_id", table_name="questions")
    op.drop_table("questions")

    op.drop_index("idx_topics_subject_id", table_name="topics")
    op.drop_table("topics")
    op.drop_table("subjects")
    op.drop_table("students")
