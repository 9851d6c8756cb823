"""Prompt template for chapter-style study notes.

The prompt embeds the JSON contract the response must follow; there is no
response_schema on the request, so parsing in the generator is the only check.
"""

from study_buddy.models.domain import AcademicDomain, level_label

# Gemini model constant -- update here when moving to a pinned version
GEMINI_MODEL = "gemini-flash-latest"

MIN_EXAMPLES = 5
MIN_PRACTICE_QUESTIONS = 8

_PROMPT_TEMPLATE = """\
You are an elite academic textbook author and expert educator. Your task is to generate \
perfect, comprehensive, book-like study notes for {level} level students.

The notes must follow these high-quality standards:
- Academic Rigor: Use precise, professional language appropriate for the {level} level.
- Logical Structure: Each topic should flow naturally from foundational concepts to complex applications.
- Visual Clarity: Use clear headings and organized sections.
- Pedagogical Value: Include deep explanations, not just surface-level facts.

For each of these topics: {topics}, generate:
1. Title: A formal, textbook-style chapter title.
2. Introduction: A broad overview and the "Why this matters" context.
3. Structured Sections: Deep-dive headings and subheadings. Content should be detailed, clear, and comprehensive.
4. Key Definitions: Crucial terminology with exact academic definitions.
5. Step-by-Step Explanations: Complex processes broken down into logical sequences.
6. Examples: Provide AT LEAST {min_examples} high-quality, illustrative examples for each topic.
- Each example must have a descriptive 'title'.
- CONTEXTUAL CONTENT: ONLY provide 'code' snippets if the topic is programming/CS. \
ONLY provide 'formula' or LaTeX if the topic is Math/Science.
- For Humanities (History, Literature, etc.), provide descriptive real-world scenarios or \
historical case studies as examples INSTEAD of code/formulas.
- Each example MUST have a detailed 'explanation' that bridges theory and practice.
7. Diagram Description: A detailed, clear description of what a professional diagram for this topic should illustrate.
8. Summary: A "Takeaway" section summarizing core concepts.
9. Practice Questions: Generate a diverse set of AT LEAST {min_questions} practice questions including:
- Multiple Choice Questions (MCQs): Include 'options' and 'correctAnswer'.
- Coding Practice/Problem Solving: ONLY for CS/Math/Science topics. For others, provide \
'Critical Thinking' or 'Analytical' questions instead.
- Short/Long Answer Questions: For conceptual understanding.

The output MUST be a JSON object matching this TypeScript interface:
{contract}
Context for {domain} level:
{framing}
"""

RESPONSE_CONTRACT = """\
interface TopicNote {
  title: string;
  introduction: string;
  sections: { heading: string; content: string; }[];
  definitions: { term: string; definition: string; }[];
  examples: { title: string; code?: string; explanation: string; }[];
  diagramDescription?: string;
  summary: string;
  practiceQuestions: {
    question: string;
    type: 'short' | 'long' | 'mcq' | 'numerical' | 'coding';
    options?: string[];
    correctAnswer?: string;
    starterCode?: string;
    solution?: string;
  }[];
}
interface Response {
  notes: TopicNote[];
}
"""


def build_framing(domain: AcademicDomain, sub_level: str | None = None) -> str:
    """Domain-specific guidance line, e.g. "- College: Focus on ..."."""
    profile = domain.profile
    text = profile.framing.format(sub_level=sub_level or profile.sub_level_fallback)
    return f"- {domain.value}: {text}"


def build_prompt(
    topics: list[str],
    domain: AcademicDomain,
    sub_level: str | None = None,
) -> str:
    """Build the generation prompt for a trimmed, non-empty topic list.

    Args:
        topics: Topic strings, one chapter each, in output order.
        domain: Academic domain selecting the framing text.
        sub_level: Optional grade, semester or exam name.

    Returns:
        The full instruction string.
    """
    return _PROMPT_TEMPLATE.format(
        level=level_label(domain, sub_level),
        topics=", ".join(topics),
        min_examples=MIN_EXAMPLES,
        min_questions=MIN_PRACTICE_QUESTIONS,
        contract=RESPONSE_CONTRACT,
        domain=domain.value,
        framing=build_framing(domain, sub_level),
    )
