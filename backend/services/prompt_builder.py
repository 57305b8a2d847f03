"""All prompt templates for Claude API calls."""

# Resume excerpt length for the short-form prompts (summary, career advice)
RESUME_EXCERPT_CHARS = 2000


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    """Full resume analysis returning the structured JSON schema."""
    return f"""You are an expert resume analyzer and career coach. Analyze the following resume against the job description and provide detailed insights.

RESUME:
{resume_text}

JOB DESCRIPTION:
{job_description}

Please provide a comprehensive analysis in the following JSON format:
{{
  "keywordAnalysis": {{
    "matched": ["keyword1", "keyword2", ...],
    "missing": ["keyword1", "keyword2", ...],
    "relevanceScore": 0-100
  }},
  "atsScore": {{
    "overall": 0-100,
    "breakdown": {{
      "formatting": 0-100,
      "keywords": 0-100,
      "structure": 0-100,
      "contact": 0-100
    }}
  }},
  "strengths": [
    "Strength 1 with specific example",
    "Strength 2 with specific example"
  ],
  "weaknesses": [
    "Weakness 1 with specific improvement suggestion",
    "Weakness 2 with specific improvement suggestion"
  ],
  "recommendations": [
    {{
      "priority": "high|medium|low",
      "category": "keywords|formatting|content|structure",
      "title": "Recommendation title",
      "description": "Detailed recommendation",
      "example": "Concrete example of improvement"
    }}
  ],
  "aiEnhancedSuggestions": [
    {{
      "type": "bullet|summary|skills|achievement",
      "original": "Original text from resume",
      "improved": "AI-enhanced version with keywords",
      "explanation": "Why this improvement works"
    }}
  ]
}}

IMPORTANT:
- Be specific and actionable
- Include actual keywords from the job description
- Provide concrete examples
- Focus on ATS optimization
- Response must be valid JSON only, no markdown or explanations"""


def build_bullet_prompt(bullets: list[str], keywords: list[str]) -> str:
    """Rewrite bullet points to weave in target keywords."""
    bullets_text = "\n".join(bullets)
    keywords_text = ", ".join(keywords)

    return f"""You are an expert resume writer. Enhance these resume bullet points to include relevant keywords and make them more impactful.

ORIGINAL BULLET POINTS:
{bullets_text}

TARGET KEYWORDS TO INCORPORATE:
{keywords_text}

Provide enhanced versions that:
1. Include relevant keywords naturally
2. Start with strong action verbs
3. Include quantifiable results where possible
4. Demonstrate impact and value
5. Are ATS-friendly

Return as JSON array:
[
  {{
    "original": "original bullet",
    "enhanced": "enhanced bullet with keywords",
    "keywords_added": ["keyword1", "keyword2"]
  }}
]"""


def build_summary_prompt(resume_text: str, job_description: str) -> str:
    return f"""Based on this resume and job description, create a compelling professional summary (3-4 sentences) that:
1. Highlights relevant experience and skills
2. Incorporates keywords from the job description
3. Demonstrates value proposition
4. Is ATS-optimized

RESUME:
{resume_text[:RESUME_EXCERPT_CHARS]}

JOB DESCRIPTION:
{job_description}

Return only the professional summary text, no additional formatting or explanation."""


def build_career_advice_prompt(resume_text: str, target_role: str) -> str:
    return f"""As a career advisor, provide personalized advice for someone with this background targeting this role:

BACKGROUND:
{resume_text[:RESUME_EXCERPT_CHARS]}

TARGET ROLE:
{target_role}

Provide 3-5 actionable pieces of advice for standing out in applications and interviews."""
