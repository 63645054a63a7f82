"""
AI Evaluator Prompt Templates

Contains structured prompts for evaluating a finished interview
according to the scoring bands.

The transcript sent to the model is a bounded view: only the most recent
turns, each cut to a fixed length. The stored transcript is never touched.
"""

from prepcoach.models.interview import Speaker, TranscriptEntry
from prepcoach.models.roles import InterviewType, Role
from prepcoach.prompts.interviewer import label, truncate


class EvaluatorPrompts:
    """
    Prompt templates for AI evaluation of an interview.

    Key principles:
    - Technical accuracy first, communication second
    - Strict scoring: wrong answers must pull the score down
    - Structured JSON output only
    """

    SCORING_BANDS = """Scoring Guidelines:
- 0-30: Poor performance, many incorrect answers, lack of understanding
- 31-50: Below average, some correct answers but many mistakes
- 51-70: Average performance, mix of correct and incorrect answers
- 71-85: Good performance, mostly correct answers with minor gaps
- 86-100: Excellent performance, correct answers with deep understanding"""

    OUTPUT_FORMAT = """Return JSON only:
{
  "overallScore": <0-100>,
  "strengths": [<array>],
  "weaknesses": [<array>],
  "missedTopics": [<array>],
  "suggestions": [<array>],
  "roleSpecificFeedback": "<text>",
  "detailedEvaluation": "<text>"
}

Score based on: technical accuracy, understanding depth, communication, problem-solving, role knowledge."""

    def __init__(
        self,
        recent_turns: int = 10,
        turn_max_chars: int = 200,
        prompt_max_chars: int = 2000,
    ):
        self.recent_turns = recent_turns
        self.turn_max_chars = turn_max_chars
        self.prompt_max_chars = prompt_max_chars

    def system_prompt(
        self,
        role: Role | str,
        difficulty: str,
        interview_type: InterviewType | str,
    ) -> str:
        """Build the evaluator instruction prompt."""
        return f"""You are an expert {label(role)} interviewer evaluating a {label(difficulty)} level {label(interview_type)} interview.

Evaluate STRICTLY and FAIRLY:
- Technical accuracy is CRITICAL - wrong answers should result in lower scores
- If the candidate gave 5 wrong answers, the score should be LOW (20-40 range)
- If the candidate gave mostly correct answers, the score should be HIGH (70-90 range)
- Depth of understanding matters more than surface knowledge
- Communication skills are important but secondary to technical accuracy
- Problem-solving approach shows real skill
- Role-specific knowledge is essential

{self.SCORING_BANDS}

Be HONEST and STRICT. If answers are wrong, reflect that in the score. Do not give high scores for wrong answers.

Provide honest, constructive feedback that helps the candidate improve."""

    def format_transcript(self, transcript: list[TranscriptEntry]) -> str:
        """Render the most recent turns as "I:" / "C:" lines."""
        recent = transcript[-self.recent_turns:] if self.recent_turns > 0 else []
        lines = []
        for entry in recent:
            speaker = "I" if entry.speaker == Speaker.INTERVIEWER else "C"
            lines.append(f"{speaker}: {truncate(entry.text, self.turn_max_chars)}")
        return "\n".join(lines)

    def evaluation_prompt(
        self,
        role: Role | str,
        difficulty: str,
        interview_type: InterviewType | str,
        transcript: list[TranscriptEntry],
    ) -> str:
        """
        Build the evaluation request for a finished transcript.

        The conversation block is shortened so the whole prompt stays
        within ``prompt_max_chars``; the output format is always kept.
        """
        header = f"Evaluate this interview ({label(role)}, {label(difficulty)}, {label(interview_type)}):\n\n"
        footer = f"\n\n{self.OUTPUT_FORMAT}"

        conversation = self.format_transcript(transcript)
        budget = self.prompt_max_chars - len(header) - len(footer)
        if len(conversation) > budget:
            conversation = truncate(conversation, max(0, budget - 3))

        return f"{header}{conversation}{footer}"
