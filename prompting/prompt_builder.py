"""
Prompt Builder Layer
====================

Turns higher-level intents into a single prompt string for the fallback
orchestrator. Everything here is pure string assembly: no I/O, no model
selection.

Responsibilities:
- Defines the Dwight persona preamble and instruction suffix
- Wraps raw user input in the persona template
- Renders retrieval-augmented prompts from already-selected documents

Invariants:
- User input and query text are embedded verbatim (never truncated)
- Documents render as "Document N: <text>", 1-indexed, in input order
- No ranking or filtering of documents happens here
"""

from typing import Sequence

from inference.types import RetrievalContext

# ── Persona Contract ──────────────────────────────────────────────────────────
PERSONA_PREAMBLE = """You are Dwight, an advanced AI assistant specialized in audio analysis, surveillance, and security systems. You are brilliant, analytical, loyal, and technically proficient. You help users with:
- Audio transcription and analysis
- Sound pattern recognition
- Security monitoring and alerts
- Forensic audio investigation
- Real-time audio processing"""

PERSONA_SUFFIX = "Respond as Dwight with technical expertise and helpful guidance:"

RAG_HEADER = "Context documents:"
RAG_INSTRUCTION = "Please answer the query based only on the provided context."


def build_persona_prompt(user_input: str) -> str:
    """Wrap raw user input in the Dwight persona template."""
    return f"{PERSONA_PREAMBLE}\n\nUser input: {user_input}\n\n{PERSONA_SUFFIX}"


def render_documents(documents: Sequence[str]) -> str:
    return "\n".join(
        f"Document {index}: {document}" for index, document in enumerate(documents, start=1)
    )


def build_rag_prompt(query: str, documents: Sequence[str]) -> str:
    """
    Assemble a retrieval-augmented prompt.

    Layout:
        Context documents:
        Document 1: <first>
        Document 2: <second>

        Query: <query>

        Please answer the query based only on the provided context.

    Args:
        query: The user question (or a fully assembled persona prompt).
        documents: Context documents, already selected upstream.

    Returns:
        Prompt string ready to pass to FallbackOrchestrator.try_models.
    """
    parts = [RAG_HEADER]
    if documents:
        parts.append(render_documents(documents))

    return "\n".join(parts) + f"\n\nQuery: {query}\n\n{RAG_INSTRUCTION}"


def build_context_prompt(context: RetrievalContext) -> str:
    return build_rag_prompt(context.query, context.documents)
