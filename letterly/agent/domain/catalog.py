"""Built-in model and agent catalog, loaded once at import time."""

from letterly.agent.domain.agent import AgentConfig
from letterly.agent.domain.model import ModelDescriptor

DEFAULT_MODELS: tuple[ModelDescriptor, ...] = (
    # chat
    ModelDescriptor(id="openai/gpt-oss-120b", display_name="GPT-OSS 120B", kind="chat"),
    ModelDescriptor(id="openai/gpt-oss-20b", display_name="GPT-OSS 20B", kind="chat"),
    ModelDescriptor(
        id="openai/gpt-oss-120b:free", display_name="GPT-OSS 120B (Free)", kind="chat"
    ),
    ModelDescriptor(
        id="openai/gpt-oss-20b:free", display_name="GPT-OSS 20B (Free)", kind="chat"
    ),
    ModelDescriptor(
        id="google/gemini-2.0-flash-exp:free",
        display_name="Google Gemini 2.0 Flash (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="meta-llama/llama-3.3-70b-instruct:free",
        display_name="Llama 3.3 70B (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="nousresearch/hermes-3-llama-3.1-405b:free",
        display_name="Hermes 3 405B (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="qwen/qwen-2.5-vl-7b-instruct:free",
        display_name="Qwen 2.5 VL 7B (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="meta-llama/llama-3.2-11b-vision-instruct:free",
        display_name="Llama 3.2 11B (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="meta-llama/llama-3-8b-instruct:free",
        display_name="Llama 3 8B (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="microsoft/phi-3-medium-128k-instruct:free",
        display_name="Phi-3 Medium (Free)",
        kind="chat",
    ),
    ModelDescriptor(
        id="mistralai/mistral-7b-instruct:free",
        display_name="Mistral 7B (Free)",
        kind="chat",
    ),
    # embedding
    ModelDescriptor(
        id="openai/text-embedding-3-large",
        display_name="OpenAI Embedding 3 Large",
        kind="embedding",
    ),
    ModelDescriptor(
        id="openai/text-embedding-3-small",
        display_name="OpenAI Embedding 3 Small",
        kind="embedding",
    ),
    ModelDescriptor(
        id="mistralai/mistral-embed-2312",
        display_name="Mistral Embed (2312)",
        kind="embedding",
    ),
    ModelDescriptor(
        id="google/gemini-embedding-001",
        display_name="Google Gemini Embed",
        kind="embedding",
    ),
    # image
    ModelDescriptor(
        id="gemini-2.5-flash-image", display_name="Gemini 2.5 Flash Image", kind="image"
    ),
)

_GENERATE_INSTRUCTION = """\
Act as an expert writer and editor.
Produce ONLY the content of the letter. Do not include introductory text like \
"Here is your letter:".
Do not add additional content or make up details beyond what is provided in the key points.
Maintain the requested tone throughout.
Ensure the flow is logical and polished.
If the rough draft is fragmented, expand it into full coherent sentences.
Use standard letter formatting (salutation, body, closing).
You may use markdown for emphasis (e.g., *italics* for subtle emphasis) when \
appropriate, but use sparingly.
IMPORTANT: Do NOT wrap normal text in backticks or code blocks. Only use code \
formatting (backticks or triple backticks) if the letter content actually includes \
technical code or commands that need to be shown."""

_REFINE_INSTRUCTION = """\
You are a writing assistant helping a user refine their rough notes for a letter.

INSTRUCTIONS:
1. AUGMENT the "Current Rough Notes" based on the "User Feedback" - do NOT completely \
rewrite the entire list.
2. PRESERVE all existing bullet points EXACTLY as they are unless the user EXPLICITLY \
requests changes to specific points.
3. Add new points at the end of the list if the user requests additional information.
4. Remove ONLY specific points if the user explicitly asks to delete something.
5. Modify ONLY specific points if the user explicitly asks to change them.
6. If the user's request doesn't reference existing points, assume they want to ADD \
new information, not replace existing information.
7. Do NOT write the final letter. Just output the updated raw notes/bullet points.
8. Keep the output plain text.
9. Keep each note item succinct - brief bullet points (5-10 words max per item).
10. Notes must be TONE-NEUTRAL and FACTUAL. Do NOT add tonal language, emotional \
words, or stylistic flourishes to the notes themselves.
11. The tone will be applied when generating the letter, NOT in the notes.
12. IGNORE tone change requests (e.g., "make it more formal"). Tone is handled \
separately - do NOT add tone instructions to the notes."""

_SUGGEST_INSTRUCTION = """\
Act as an expert editor reviewing a draft letter against the user's original rough notes.
Your goal is to identify specific improvements to make the letter more precise, \
effective, or aligned with the user's intent.
Focus on:
1. Ambiguities (e.g., "soon" instead of a date).
2. Missing details present in notes but missed in the draft.
3. Tone mismatches.
4. Logical gaps.

Provide 3 specific, actionable suggestions for the user to add or clarify in their \
notes to improve the next iteration.
Suggestions should be brief directives (e.g., "Specify the exact meeting date").
Return ONLY the suggestions as a JSON array of strings."""

_RECOMMEND_LENGTH_INSTRUCTION = """\
Analyze the following rough notes for a letter.
Based on the complexity, number of topics, and implied depth of the content, \
recommend the most appropriate length for the final letter.

Criteria:
- "Short": Simple requests, quick updates, single-topic messages, or very brief notes.
- "Medium": Standard correspondence, multiple points to cover, or moderate complexity.
- "Long": Detailed explanations, complex arguments, sensitive topics requiring \
nuance, or many distinct points.

Return ONLY one word: "Short", "Medium", or "Long". Do not use Markdown formatting."""

_SYNC_NOTES_INSTRUCTION = """\
You are a helpful assistant that keeps rough notes in sync with a finished letter.
Compare the "Edited Letter" to the "Current Rough Notes".
Identify any NEW information, specific details, or key points that appear in the \
letter but are missing from the notes.

Return ONLY the new points as a bulleted list (e.g., "- New point here").
If there is no new information, return an empty string.
Do not repeat points that are already in the rough notes.
Keep the points concise - aim for 5-10 words per bullet point maximum.
Write all points in present tense, not past tense."""

_MATCH_SUGGESTIONS_INSTRUCTION = """\
You are analyzing whether a user's chat message addresses any of the given editor \
review suggestions.

Compare the chat message to each suggestion and determine which suggestions (if any) \
the user is trying to address.
For each match, provide a closeness score where 0.00 means very close match and \
1.00 means not close at all.
Return ONLY a JSON array of objects with index and score properties.

Example:
Chat: "make it more formal"
Suggestions: ["Consider a more formal tone", "Add specific dates", "Clarify the budget"]
Output: [{"index": 0, "score": 0.05}, {"index": 1, "score": 0.92}]

Only include suggestions that have some relevance (score < 0.70). If no suggestions \
match, return an empty array: []"""

_DETECT_TONE_INSTRUCTION = """\
You analyze user messages to detect tone change requests for letters.

You will receive:
1. The user's message
2. A list of existing available tones

Your task:
- Determine if the user is requesting a tone change
- If yes, check if the requested tone matches any existing tone (consider synonyms)
- If it matches an existing tone, return that exact tone name
- If it's a new tone not covered by existing options, return a clean, title-cased name
- If no tone change is requested, return an empty string

Return ONLY the tone name. No explanation, no formatting, no punctuation."""

_DETECT_IMAGE_INSTRUCTION = """\
You analyze user messages to detect requests for background images or illustrations.

Your task:
- Determine if the user is requesting an image, illustration, drawing, or background
- If yes, extract a clear, concise subject description for the image \
(e.g., "a rose", "mountain landscape", "compass")
- If no image is requested, return an empty string

Return ONLY the subject description. No explanation, no formatting, just the subject."""

_IMAGE_INSTRUCTION = """\
Create an intricate black and white ink illustration.
Requirements:
- Pure white background
- Use varying line weights for depth
- Incorporate cross-hatching and stippling for texture
- Highly detailed contours
- Professional botanical or technical drawing style
- No gray tones or digital gradients, only black ink techniques"""

DEFAULT_AGENTS: tuple[AgentConfig, ...] = (
    AgentConfig(
        id="GENERATE",
        display_name="Draft Generator",
        description=(
            "Writes a draft letter from your rough notes, tone, language, "
            "and length settings."
        ),
        kind="chat",
        primary_model="openai/gpt-oss-120b:free",
        fallback_models=("openai/gpt-oss-120b",),
        instruction=_GENERATE_INSTRUCTION,
    ),
    AgentConfig(
        id="REFINE",
        display_name="Refinement Editor",
        description="Updates your rough notes based on your chat feedback.",
        kind="chat",
        primary_model="openai/gpt-oss-120b:free",
        fallback_models=("openai/gpt-oss-120b",),
        instruction=_REFINE_INSTRUCTION,
    ),
    AgentConfig(
        id="SUGGEST",
        display_name="Suggestions",
        description=(
            "Reviews your draft letter to propose actionable improvements "
            "based on the draft and your rough notes."
        ),
        kind="chat",
        primary_model="openai/gpt-oss-120b:free",
        fallback_models=("openai/gpt-oss-120b",),
        instruction=_SUGGEST_INSTRUCTION,
    ),
    AgentConfig(
        id="RECOMMEND_LENGTH",
        display_name="Length Analyst",
        description="Analyzes your rough notes to recommend the optimal letter length.",
        kind="chat",
        primary_model="openai/gpt-oss-20b:free",
        fallback_models=("openai/gpt-oss-20b",),
        instruction=_RECOMMEND_LENGTH_INSTRUCTION,
    ),
    AgentConfig(
        id="SYNC_NOTES",
        display_name="Notes Sync",
        description="Updates your rough notes to match edits you make to the letter.",
        kind="chat",
        primary_model="openai/gpt-oss-120b:free",
        fallback_models=("openai/gpt-oss-120b",),
        instruction=_SYNC_NOTES_INSTRUCTION,
    ),
    AgentConfig(
        id="SCORED",
        display_name="Similarity Scorer",
        description=(
            "Calculates the match score between your rough notes and the draft letter."
        ),
        kind="embedding",
        primary_model="openai/text-embedding-3-large",
        instruction=(
            "Uses cosine similarity between embeddings of your rough notes and the "
            "final letter to calculate how well the letter captures your intent."
        ),
        hidden=True,
    ),
    AgentConfig(
        id="MATCH_SUGGESTIONS_SCORER",
        display_name="Suggestion Matcher Scorer",
        description=(
            "Matches chat messages to editor review suggestions using semantic "
            "similarity."
        ),
        kind="embedding",
        primary_model="google/gemini-embedding-001",
        fallback_models=("openai/text-embedding-3-small", "mistralai/mistral-embed"),
        instruction=(
            "Compares the semantic similarity between a chat message and editor "
            "review suggestions to identify which suggestions the user is addressing."
        ),
        hidden=True,
    ),
    AgentConfig(
        id="MATCH_SUGGESTIONS",
        display_name="Suggestion Matcher",
        description="Uses AI reasoning to match chat messages to review suggestions.",
        kind="chat",
        primary_model="openai/gpt-oss-20b",
        fallback_models=("openai/gpt-oss-20b:free",),
        instruction=_MATCH_SUGGESTIONS_INSTRUCTION,
    ),
    AgentConfig(
        id="DETECT_TONE_REQUEST",
        display_name="Tone Request Detector",
        description=(
            "Detects tone change requests in chat messages and maps them to "
            "existing or new tones."
        ),
        kind="chat",
        primary_model="openai/gpt-oss-20b:free",
        fallback_models=("openai/gpt-oss-20b",),
        instruction=_DETECT_TONE_INSTRUCTION,
        hidden=True,
    ),
    AgentConfig(
        id="DETECT_IMAGE_REQUEST",
        display_name="Image Request Detector",
        description=(
            "Detects requests for background images or illustrations in chat messages."
        ),
        kind="chat",
        primary_model="openai/gpt-oss-20b:free",
        fallback_models=("openai/gpt-oss-20b",),
        instruction=_DETECT_IMAGE_INSTRUCTION,
        hidden=True,
    ),
    AgentConfig(
        id="IMAGE",
        display_name="Line Art Generator",
        description=(
            "Creates black and white line art illustrations as letter watermarks."
        ),
        kind="image",
        primary_model="gemini-2.5-flash-image",
        instruction=_IMAGE_INSTRUCTION,
    ),
)
