"""
AI Interviewer Prompt Templates

Contains structured prompts for:
- The interviewer system instruction
- The opening question request
- Follow-up / topic-pivot requests built from the last exchange

Every builder is a pure function of its arguments. Unknown roles or
difficulties fall back to a generic bucket instead of raising.
"""

from enum import Enum

from prepcoach.models.roles import (
    InterviewType,
    Role,
    get_difficulty_tone,
    get_role_focus_areas,
)


def label(value: Enum | str) -> str:
    """Plain text for an enum member or raw string."""
    return value.value if isinstance(value, Enum) else str(value)


def truncate(text: str, limit: int) -> str:
    """Cut text to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _coerce_type(interview_type: InterviewType | str) -> InterviewType | None:
    try:
        return InterviewType(interview_type)
    except ValueError:
        return None


def _coerce_role(role: Role | str) -> Role | None:
    try:
        return Role(role)
    except ValueError:
        return None


class InterviewerPrompts:
    """
    Prompt templates for the AI interviewer.

    Key principles:
    - One concise question at a time
    - Stay strictly inside the interview type
    - Never reveal the question count or give hints
    - Professional, neutral tone
    """

    def __init__(self, question_max_chars: int = 100, answer_max_chars: int = 150):
        self.question_max_chars = question_max_chars
        self.answer_max_chars = answer_max_chars

    def system_prompt(
        self,
        role: Role | str,
        difficulty: str,
        interview_type: InterviewType | str,
    ) -> str:
        """Build the interviewer instruction prompt."""
        role_text = label(role)
        focus = get_role_focus_areas(role)
        kind = _coerce_type(interview_type)
        type_text = label(interview_type)

        if kind == InterviewType.BEHAVIORAL:
            type_instructions = f"""CRITICAL: This is a BEHAVIORAL interview ONLY.
- ABSOLUTELY FORBIDDEN: Do NOT ask ANY technical questions about {focus}
- FORBIDDEN: No questions about code, frameworks, databases, APIs, or any technical implementation
- FORBIDDEN: No questions about programming languages, tools, or technical skills
- ONLY ALLOWED: Behavioral questions about:
  * Past work experiences and projects (the experience, not the technical details)
  * Teamwork and collaboration situations
  * How you handle conflicts, deadlines, or pressure
  * Leadership examples and decision-making
  * Work style, motivation, and career goals
  * Problem-solving approaches (the process, not technical solutions)
  * Communication and interpersonal skills
- Question format: "Tell me about a time when...", "Describe a situation where...", "How do you handle...", "Give an example of..."
- Example GOOD questions: "Tell me about a challenging project you worked on and how you handled it", "How do you prioritize tasks when facing tight deadlines?"
- Example BAD questions (DO NOT ASK): "What is React?", "How do you optimize database queries?", "Explain the Node.js event loop\""""
        elif kind == InterviewType.TECHNICAL:
            showcase = _coerce_role(role)
            tech = showcase.showcase_technology if showcase else "your main stack"
            target = showcase.showcase_optimization if showcase else "an application"
            type_instructions = f"""CRITICAL: This is a TECHNICAL interview ONLY.
- ABSOLUTELY FORBIDDEN: Do NOT ask behavioral, HR, or soft skills questions
- FORBIDDEN: No questions about past experiences, teamwork, or work style (unless about technical decision-making)
- ONLY ALLOWED: Technical questions about {focus}:
  * Coding concepts, syntax, and best practices
  * Architecture and system design
  * Problem-solving and algorithms
  * Implementation details and technical solutions
  * Tools, frameworks, and technologies specific to {role_text}
  * Performance optimization and debugging
- Question format: "Explain...", "How would you...", "What is...", "Describe the difference between..."
- Example GOOD questions: "Explain how {tech} works", "How would you optimize {target}?"
- Example BAD questions (DO NOT ASK): "Tell me about yourself", "How do you handle stress?", "Describe your work style\""""
        else:
            type_instructions = f"""This is a MIXED interview.
- You can ask BOTH technical and behavioral questions
- Alternate or mix:
  * Technical: {focus} concepts, coding, architecture
  * Behavioral: past experiences, teamwork, problem-solving, work style
- Balance both types throughout the interview"""

        return f"""You are a senior {role_text} interviewer conducting a {label(difficulty)} level {type_text} interview.

{type_instructions}

Role Focus: {focus}
Difficulty Level: {get_difficulty_tone(difficulty)}

Rules:
- Ask ONE concise question (1-2 sentences max)
- Stay STRICTLY within the interview type ({type_text})
- Ask contextual follow-ups based on answers, but maintain the interview type
- Don't reveal question count or provide hints
- Be professional, neutral, concise"""

    def first_question_prompt(
        self,
        role: Role | str,
        difficulty: str,
        interview_type: InterviewType | str,
    ) -> str:
        """Build the user prompt that asks for the opening question."""
        role_text = label(role)
        level = label(difficulty)
        kind = _coerce_type(interview_type)

        if kind == InterviewType.BEHAVIORAL:
            return (
                f"Ask the first behavioral question for a {role_text} position at {level} level. "
                "Focus on soft skills, past experiences, or work style. DO NOT ask technical questions."
            )
        if kind == InterviewType.TECHNICAL:
            return (
                f"Ask the first technical question for a {role_text} position at {level} level. "
                f"Focus on {role_text} technical skills and knowledge. DO NOT ask behavioral questions."
            )
        return (
            f"Ask the first question for a {role_text} position at {level} level. "
            "This is a mixed interview, so you can ask either technical or behavioral questions."
        )

    def context_prompt(
        self,
        last_question: str,
        last_answer: str,
        role: Role | str,
        difficulty: str,
        interview_type: InterviewType | str,
        question_number: int,
    ) -> str:
        """
        Build the user prompt for the next question.

        Only the last exchange is sent, truncated, to keep requests small.

        Args:
            last_question: Text of the question just answered
            last_answer: The candidate's answer to it
            role: Target role
            difficulty: Difficulty level
            interview_type: Interview type
            question_number: Number of the question being requested
        """
        role_text = label(role)
        level = label(difficulty)
        type_text = label(interview_type)
        kind = _coerce_type(interview_type)

        if kind == InterviewType.BEHAVIORAL:
            type_reminder = f"""CRITICAL: This is a BEHAVIORAL interview ONLY.
- ABSOLUTELY FORBIDDEN: Do NOT ask ANY technical questions about {role_text}
- FORBIDDEN: No code, frameworks, or technical implementation questions
- ONLY ask behavioral questions about experiences, teamwork, problem-solving, work style"""
        elif kind == InterviewType.TECHNICAL:
            type_reminder = f"""CRITICAL: This is a TECHNICAL interview ONLY.
- ABSOLUTELY FORBIDDEN: Do NOT ask behavioral or HR questions
- ONLY ask technical questions about {role_text} technologies and concepts"""
        else:
            type_reminder = "Remember: This is a MIXED interview. You can ask either technical or behavioral questions."

        return f"""Previous Q: "{truncate(last_question, self.question_max_chars)}"
Previous A: "{truncate(last_answer, self.answer_max_chars)}"

{type_reminder}

Role: {role_text}, Difficulty: {level}, Question #{question_number}

Choose exactly ONE of:
1. Ask a follow-up question related to the previous answer (if it makes sense)
2. Ask a NEW question on a different topic (to cover more areas)
Never combine a follow-up and a new topic in the same question.

IMPORTANT:
- Stay STRICTLY within the {type_text} interview type
- Maintain focus on the {role_text} role at {level} level
- Ask a concise question (1-2 sentences)
- Do not mention how many questions remain
- If the previous answer was brief or the candidate seems to want to move on, ask a NEW question instead of following up"""
