"""
Prompt templates for remote roadmap and career guide generation.
"""

from typing import Optional

from career_roadmap.common.types import CareerProfile

ROADMAP_PROMPT = """Generate a detailed career roadmap for {user_name} about becoming a {career}.

Structure the roadmap in phases:
- Phase 1: Foundation (Years 0-2) with Educational Background, Core Skills to Learn, and Basic Tools
- Phase 2: Specialization (Years 2-4) with Specialized Skills, Tools & Frameworks, Projects to Build
- Phase 3: Advanced Development (Years 4-6) with Open Source Contributions, Portfolio Building
- Phase 4: Career Pathways (Years 6+) with Job Titles and Growth Options

Include specific skills, tools, technologies, and resources relevant to this career.
Make it detailed, actionable, and include emojis for section headers.
Format with clean headings using bold text (**) rather than markdown headings.
Use phases, bullet points and numbered lists where appropriate.
"""

CAREER_GUIDE_PROMPT = """Generate a comprehensive, personalized career guide for {user_name} about becoming a {career}.

Include the following sections in this exact order:
1. A title with the career name
2. A brief introduction to the career (2-3 sentences)
3. A detailed career roadmap section structured in phases:
   - Phase 1: Foundation (Years 0-2) with Educational Background, Core Skills to Learn, and Basic Tools
   - Phase 2: Specialization (Years 2-4) with Specialized Skills, Tools & Frameworks, Projects to Build
   - Phase 3: Advanced Development (Years 4-6) with Open Source Contributions, Portfolio Building
   - Phase 4: Career Pathways (Years 6+) with Job Titles and Growth Options
4. Required Skills (Technical and Soft Skills)
5. Salary Information (based on: {salary})
6. Industry Outlook and Job Market
7. Work Environment and Culture
8. Resources for Further Learning

Make it conversational, personalized, and include emojis for section headers.
Format with clean headings using bold text (**) rather than markdown headings.
Use clear phase headings, bullet points and numbered lists where appropriate.
"""

DEFAULT_USER_NAME = "the user"


def build_roadmap_prompt(career: str, user_name: Optional[str] = None) -> str:
    """Build the single user-role prompt for a roadmap request."""
    return ROADMAP_PROMPT.format(
        user_name=user_name or DEFAULT_USER_NAME,
        career=(career or "").strip(),
    )


def build_career_guide_prompt(profile: CareerProfile, user_name: Optional[str] = None) -> str:
    """Build the single user-role prompt for a career guide request."""
    return CAREER_GUIDE_PROMPT.format(
        user_name=user_name or DEFAULT_USER_NAME,
        career=(profile.career or "").strip(),
        salary=profile.salary_range or "typical market rates",
    )
