from __future__ import annotations

SOURCE_NOT_PROVIDED = "Not provided."

STRICT_PROMPT_TEMPLATE = """You are a highly accurate plagiarism detection tool. Your task is to analyze two pieces of text: a "Source Text" and a "Text to Check".

Compare them meticulously and identify all instances of plagiarism, including direct copies and heavily paraphrased sentences.

Your output must be in JSON format.

Based on your analysis, provide:
1.  An 'overallSimilarityPercentage' as a number between 0 and 100.
2.  A concise 'summary' of your findings.
3.  An array called 'similarities', where each object represents a specific instance of plagiarism. Each object in the array must contain:
    - 'sourceText': The exact text snippet from the "Source Text".
    - 'checkedText': The corresponding plagiarized snippet from the "Text to Check".
    - 'explanation': A brief explanation of why this is considered a similarity.

Here are the texts:

---
**Source Text:**
{source_text}
---
**Text to Check:**
{text_to_check}
---
"""

WEB_SEARCH_PROMPT_TEMPLATE = """You are a highly accurate plagiarism detection tool with access to Google Search.
Your task is to analyze the "Text to Check".

1. Use your search capabilities to find any published online sources that contain similar or identical text.
2. If a "Source Text" is provided, also compare the "Text to Check" against it. If "Source Text" is empty, focus solely on web sources.
3. Identify all instances of plagiarism, including direct copies and heavily paraphrased sentences from any source you find (web or provided).

Your final output MUST be a single JSON object wrapped in ```json ... ```. Do not include any other text outside of the JSON block.

The JSON object must conform to this structure:
- 'overallSimilarityPercentage': A number between 0 and 100, considering all sources.
- 'summary': A concise summary of your findings.
- 'similarities': An array where each object represents a specific instance of plagiarism. Each object must contain:
  - 'sourceText': The text snippet from the original source (either the provided "Source Text" or a web source).
  - 'checkedText': The corresponding plagiarized snippet from the "Text to Check".
  - 'explanation': A brief explanation, mentioning the source if it was from the web.

Here are the texts:

---
**Source Text:**
{source_text}
---
**Text to Check:**
{text_to_check}
---
"""

# Structural constraint for strict mode, in the model service's schema dialect.
SIMILARITY_RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "overallSimilarityPercentage": {
            "type": "NUMBER",
            "description": "A numerical percentage (0-100) representing the overall similarity.",
        },
        "summary": {
            "type": "STRING",
            "description": "A brief summary of the plagiarism findings.",
        },
        "similarities": {
            "type": "ARRAY",
            "description": "A list of specific text matches found.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "sourceText": {
                        "type": "STRING",
                        "description": "The original text snippet from the source document.",
                    },
                    "checkedText": {
                        "type": "STRING",
                        "description": "The matching text snippet from the document being checked.",
                    },
                    "explanation": {
                        "type": "STRING",
                        "description": "An explanation of the similarity.",
                    },
                },
                "required": ["sourceText", "checkedText", "explanation"],
            },
        },
    },
    "required": ["overallSimilarityPercentage", "summary", "similarities"],
}
