"""Prompt for action item extraction from meeting summaries.

The prompt pins the exact output schema (field names and enumerated
values) so the reply can be parsed without a tool-use round trip. The
summary is placed after the instructions because summaries are short.
"""

ACTION_ITEM_PROMPT = """You are given a transcript summary of a meeting. Your task is to extract all clear and implicit action items and return them strictly in JSON format according to the schema below.

Each action item must be a JSON object with exactly these fields:

- id: string - unique identifier like "AI-1", "AI-2", etc.
- description: string - concise action that begins with a verb (e.g. "Prepare the report", "Schedule the demo")
- assignedTo: object or null - the person responsible, as {{"id": string, "name": string, "email": string (optional), "role": string (optional)}}; null if no owner is mentioned
- priority: one of "high", "medium", "low" - infer from urgency or importance
- deadline: string - ISO 8601 date (YYYY-MM-DD) if a deadline is mentioned; omit the field otherwise
- status: one of "pending", "in-progress", "completed" - default to "pending" unless stated otherwise
- category: string - category based on context (e.g. "Development", "Design", "Operations")
- extractedFromContext: string - the original sentence or phrase in the summary that led to this action item

Guidelines:
- If no owner is mentioned, set "assignedTo": null.
- If no deadline is explicitly mentioned, omit "deadline".
- Each description must begin with a verb.
- Output ONLY a valid JSON array of action item objects. No prose, no explanations, no markdown code fences.
- If there are no action items, output [].

Now extract action items from this transcript summary:
{summary}
"""
