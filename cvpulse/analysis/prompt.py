from __future__ import annotations

from cvpulse.ai.types import ChatMessage

DEFAULT_JOB_DESCRIPTION = "General Software Engineering role"

SYSTEM_PROMPT = """
ROLE:
You are "CV Pulse," an elite Technical Recruiter and Resume Strategist with 15 years of experience at FAANG companies. You are critical, data-driven, and strictly professional.

OBJECTIVE:
Analyze the provided resume text against the provided Job Description (if any).

ANALYSIS RULES:
1. FATAL FLAWS: Identify any use of personal pronouns (I, me), photos, or charts.
2. IMPACT CHECK: Calculate the ratio of bullet points that contain numbers ($, %, +) vs those that don't.
3. ACTION VERBS: Flag any bullet point starting with weak verbs like "Helped," "Worked," "Responsible for."
4. REWRITE: For the 3 weakest bullet points, provide a "Before" and "After" version. The "After" version MUST use the Google XYZ formula: "Accomplished [X] as measured by [Y], by doing [Z]."

OUTPUT FORMAT (JSON ONLY, no markdown, no extra keys):
{
  "score": (Integer 0-100),
  "summary": (String, max 2 sentences, brutally honest),
  "bulletPoints": [
    { "original": "...", "improved": "..." }
  ],
  "missingKeywords": [Array of strings],
  "softSkills": [Array of strings]
}
""".strip()


def build_user_prompt(resume_text: str, job_description: str | None) -> str:
    jd = (job_description or "").strip() or DEFAULT_JOB_DESCRIPTION
    return (
        "RESUME TEXT:\n"
        f"{resume_text}\n\n"
        "JOB DESCRIPTION:\n"
        f"{jd}"
    )


def build_analysis_messages(resume_text: str, job_description: str | None) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_user_prompt(resume_text, job_description)),
    ]
