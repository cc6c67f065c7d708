from __future__ import annotations

SYSTEM_TEMPLATE = """\
You answer questions for a health knowledge base.
You MUST answer only using the provided CONTEXT. Do NOT invent or guess.
If the question is related to the domain but not covered by CONTEXT, reply: "{defer}"
If the question is outside the domain entirely, reply exactly: "I cant answer this question"
Continuity: if the user asks a follow-up about the same subject, keep answers consistent
with earlier turns. If the subject changed, treat it as a new question.
Be concise and kind. Use short paragraphs. Do not mention context, snippets or sources.
{language_instruction}
"""

LANGUAGE_INSTRUCTION = {
    "en": "Answer in English unless the user requests Arabic.",
    "ar": "أجب باللغة العربية ما لم يطلب المستخدم غير ذلك.",
}

CONTEXT_TEMPLATE = "CONTEXT (authoritative):\n{context}"

DIALOGUE_TEMPLATE = (
    "DIALOGUE CONTEXT (use only to maintain continuity; do NOT create facts from this):\n"
    "{dialogue_context}"
)

QUESTION_TEMPLATE = "USER QUESTION:\n{question}\n\nAnswer now. Remember all RULES."


def build_messages(
    question: str,
    context: str,
    *,
    dialogue_context: str = "",
    language: str = "en",
    defer_text: str = "It’s better to ask a doctor or a trusted adult.",
) -> list[dict[str, str]]:
    system = SYSTEM_TEMPLATE.format(
        defer=defer_text,
        language_instruction=LANGUAGE_INSTRUCTION.get(language, LANGUAGE_INSTRUCTION["en"]),
    )
    messages = [
        {"role": "system", "content": system},
        {"role": "user", "content": CONTEXT_TEMPLATE.format(context=context)},
    ]
    if dialogue_context:
        messages.append(
            {"role": "user", "content": DIALOGUE_TEMPLATE.format(dialogue_context=dialogue_context)}
        )
    messages.append({"role": "user", "content": QUESTION_TEMPLATE.format(question=question)})
    return messages
