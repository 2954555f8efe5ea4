"""Prompt texts for every generation kind.

User templates are ``str.format`` templates; literal braces in the JSON
examples are doubled.
"""

# ── Quiz ──────────────────────────────────────────────────────────────────────

QUIZ_SYSTEM_PROMPT = "You are a coding tutor. You only ever reply with a valid JSON array."

QUIZ_USER_TEMPLATE = """Write 5 multiple-choice questions about {topic} at {difficulty} level.

Each question has exactly four options and one correct answer.

OUTPUT FORMAT (strict JSON array only):
[{{"question": "...", "options": ["A", "B", "C", "D"], "correct": 0, "explanation": "..."}}]

"correct" is the zero-based index of the right option.
Respond ONLY with the JSON array. No markdown, no preamble.
"""

# ── Interview answer critique ─────────────────────────────────────────────────

INTERVIEW_SYSTEM_PROMPT = "You are an experienced technical interviewer."

INTERVIEW_USER_TEMPLATE = """Role: {role}
Question: {question}
Candidate answer: "{text}"

Critique the answer. Reply in plain text using exactly these three lines:
RATING: [0-100]
FEEDBACK: [what worked and what did not]
IMPROVEMENT: [a stronger version of the answer]
"""

# ── Resume summary / experience ───────────────────────────────────────────────

SUMMARY_SYSTEM_PROMPT = "You are a professional resume writer for top-tier tech companies."

SUMMARY_USER_TEMPLATE = (
    "Rewrite this professional summary so it is sharp, action-oriented and "
    "ATS-friendly, in at most 4 sentences: \"{text}\""
)

EXPERIENCE_SYSTEM_PROMPT = "You are a senior technical recruiter."

EXPERIENCE_USER_TEMPLATE = (
    "Rewrite this job description as quantifiable, result-driven achievements. "
    "Lead with strong action verbs: \"{text}\""
)

# ── Full resume ───────────────────────────────────────────────────────────────

FULL_RESUME_SYSTEM_PROMPT = "You are a professional resume writer. You only ever reply with valid JSON."

FULL_RESUME_USER_TEMPLATE = """Build a complete professional resume from this input: "{text}"

OUTPUT FORMAT (strict JSON object only):
{{
  "fullName": "Name (inferred or [[Name]])",
  "role": "Target role (inferred or [[Role]])",
  "email": "Email (inferred or [[Email]])",
  "phone": "Phone (inferred or [[Phone]])",
  "summary": "Professional summary, 4-5 strong sentences",
  "skills": ["Skill 1", "Skill 2", "Skill 3", "Skill 4", "Skill 5", "Skill 6", "Skill 7", "Skill 8"],
  "experience": [
    {{"role": "Job title", "company": "Company", "date": "Date range", "points": ["Point 1", "Point 2", "Point 3", "Point 4", "Point 5"]}}
  ],
  "education": [
    {{"degree": "e.g. BS Computer Science", "school": "University", "date": "Graduation year", "desc": "Honors or coursework (optional)"}}
  ]
}}

RULES:
1. Write 4-6 detailed, quantified bullet points per job using the STAR method; each point about two lines long.
2. Aim for a dense, full-page resume. Do not be brief.
3. List 8-12 relevant technical and soft skills.
4. Never invent dates, employers or schools missing from the input. Use placeholders such as "[[Date Needed]]" or "[[Company Name]]".
5. Infer the target role from the input when it is not stated.

Respond ONLY with the JSON object. No markdown, no preamble.
"""

# ── LinkedIn ──────────────────────────────────────────────────────────────────

LINKEDIN_BIO_SYSTEM_PROMPT = "You are a LinkedIn Top Voice and personal-branding expert."

LINKEDIN_BIO_USER_TEMPLATE = """Rewrite this LinkedIn headline and About section so recruiters cannot ignore it.
Input: "{text}"

Guidelines:
- Headline: catchy, keyword-rich, authoritative (e.g. "Helping X do Y | Ex-Google").
- About: opens with a hook, tells a story, shows achievements, ends with a call to action.
- Tone: professional, approachable, confident.

Return ONLY the rewritten text with a "HEADLINE:" section and an "ABOUT:" section.
"""

LINKEDIN_POST_SYSTEM_PROMPT = "You are a LinkedIn ghostwriter known for viral posts."

LINKEDIN_POST_USER_TEMPLATE = """Turn this topic into a LinkedIn post: "{text}"

Structure:
1. Hook: one scroll-stopping line.
2. Story or insight: short, punchy sentences with plenty of white space.
3. Takeaway: one piece of actionable advice.
4. Engagement: close with a question to the reader.
5. Hashtags: 3-5 relevant hashtags.

Tone: inspirational and authentic, short lines for readability.
"""

LINKEDIN_MESSAGE_SYSTEM_PROMPT = "You are a professional networking expert."

LINKEDIN_MESSAGE_USER_TEMPLATE = """Write a personalised LinkedIn connection request (max 300 characters) for this person: "{text}"

Guidelines:
- Reference one specific detail from their bio where possible.
- Say plainly why I want to connect (learning, shared interests, collaboration).
- No sales pitch. Be genuine.
- Sign off with: "Best, [Your Name]"
"""

# ── Career coach ──────────────────────────────────────────────────────────────

CAREER_COACH_SYSTEM_PROMPT = "You are a senior tech mentor and career coach."

CAREER_COACH_USER_TEMPLATE = """User question: "{text}"

Guide the user on their tech career. You can:
- recommend technology stacks,
- point out specific gaps when they share resume details,
- suggest relevant certifications,
- stay encouraging but realistic.

Style: conversational, helpful and structured. Use Markdown.
"""

# ── Interview player ──────────────────────────────────────────────────────────

INTERVIEW_FEEDBACK_SYSTEM_PROMPT = "You are a senior technical interviewer."

INTERVIEW_FEEDBACK_USER_TEMPLATE = """Grade this answer for a {role} position.

Question: "{question}"
Candidate answer: "{text}"

OUTPUT FORMAT (strict JSON object only):
{{
  "score": 85,
  "feedback": "1-2 sentences on what was good.",
  "improvement": "1-2 specific technical improvements or missing keywords.",
  "example": "A short snippet of how a stronger answer would sound."
}}

"score" is an integer from 0 to 100.
Respond ONLY with the JSON object. No markdown, no preamble.
"""

INTERVIEW_QUESTION_SYSTEM_PROMPT = INTERVIEW_FEEDBACK_SYSTEM_PROMPT

INTERVIEW_QUESTION_USER_TEMPLATE = """Ask one {difficulty} technical interview question for a {role} role.

Topic: {topic}
{previous_question_line}
Return only the question text.
"""

PREVIOUS_QUESTION_LINE = 'Previous question: "{previous_question}" (do not repeat it).\n'
