"""
Roadmap Renderer

Turns a RoadmapRecord (or no record) into the canonical roadmap document:

    <title>

    <phase title>
    - <topic>
    - <topic>

    <phase title>
    - <topic>

Phases and topics are emitted in dataset order. When no record matched, a
fixed four-phase generic document is emitted with the career name in the
title only. Rendering is pure: identical input gives byte-identical output.
"""

from typing import Iterable, List, Optional

from career_roadmap.common.types import CareerProfile, Phase, RoadmapRecord

BULLET = "- "

GENERIC_TITLE = "Career Roadmap: {career_name}"

GENERIC_PHASES = (
    Phase(
        title="Phase 1: Foundation (Years 0-2)",
        topics=(
            "Build a solid educational background through a degree, certifications or self-study",
            "Learn the fundamental principles and terminology of the field",
            "Get comfortable with the industry-standard tools and software",
            "Develop problem-solving, analytical thinking and communication skills",
        ),
    ),
    Phase(
        title="Phase 2: Specialization (Years 2-4)",
        topics=(
            "Pick a sub-field and learn its advanced techniques",
            "Master the specialized frameworks and automation tools of your niche",
            "Build a portfolio of personal and collaborative projects",
            "Contribute to open source or community projects to build reputation",
        ),
    ),
    Phase(
        title="Phase 3: Professional Growth (Years 4-6)",
        topics=(
            "Move from junior to mid-level positions and take on more responsibility",
            "Mentor junior colleagues and lead small projects",
            "Grow cross-functional and business skills",
            "Build your professional network and personal brand",
        ),
    ),
    Phase(
        title="Phase 4: Leadership (Years 6+)",
        topics=(
            "Take on senior, team lead or management roles",
            "Shape strategy and vision for your team or organization",
            "Explore consulting, entrepreneurship or teaching",
            "Give back through mentorship and knowledge sharing",
        ),
    ),
)

GENERIC_CLOSING = (
    "Would you like to know more about any specific phase or aspect of this career roadmap?"
)


class RoadmapRenderer:
    """Deterministic text rendering for roadmap records and career guides."""

    def render(self, record: Optional[RoadmapRecord], career_name: str) -> str:
        """
        Render a roadmap document.

        Args:
            record: Matched dataset record, or None for the generic document
            career_name: Career name as supplied by the caller; used only in
                the generic document title

        Returns:
            Rendered document text
        """
        if record is None:
            return self.render_generic(career_name)
        return "\n".join(self._record_lines(record.title, record.phases)).rstrip("\n")

    def render_generic(self, career_name: str) -> str:
        """Render the fixed four-phase document for an unmatched career."""
        title = GENERIC_TITLE.format(career_name=(career_name or "").strip())
        lines = self._record_lines(title, GENERIC_PHASES)
        lines.append(GENERIC_CLOSING)
        return "\n".join(lines)

    def _record_lines(self, title: str, phases: Iterable[Phase]) -> List[str]:
        lines = [title, ""]
        for phase in phases:
            lines.append(phase.title)
            lines.extend(f"{BULLET}{topic}" for topic in phase.topics)
            lines.append("")
        return lines

    def render_career_guide(self, profile: CareerProfile) -> str:
        """
        Render the long-form career guide for a career profile.

        Used when the remote guide generation is unavailable. Missing profile
        fields are replaced with neutral wording.

        Args:
            profile: Career, skill, hobby and salary range to substitute

        Returns:
            Rendered guide text
        """
        career = (profile.career or "").strip() or "this career"
        skill = (profile.skill or "").strip() or "your chosen field"
        hobby = (profile.hobby or "").strip() or "your personal interests"
        salary = (profile.salary_range or "").strip() or "Varies by region and experience"

        return CAREER_GUIDE_TEMPLATE.format(
            career=career,
            skill=skill,
            skill_lower=skill.lower(),
            hobby=hobby,
            salary=salary,
        )


CAREER_GUIDE_TEMPLATE = """**{career}**

{career} is a profession that combines skills in {skill} with interests related to {hobby}. This career path allows professionals to apply technical expertise in creative and practical ways that align with their personal interests.

**🎯 Career Roadmap: {career}**

**🔹 Phase 1: Foundation (Years 0-2)**
- **Educational Background**
  - Bachelor's degree in {skill} or related field (recommended but not always required)
  - Relevant certifications and online courses
  - Self-learning through tutorials and documentation

- **Core Skills to Learn**
  - Fundamental principles of {skill}
  - Basic understanding of industry tools and software
  - Problem-solving and analytical thinking
  - Communication skills for team collaboration

- **Basic Tools & Technologies**
  - Industry-standard software and platforms
  - Version control systems
  - Project management tools

**🔹 Phase 2: Specialization (Years 2-4)**
- **Specialized Skills**
  - Advanced techniques in {skill}
  - In-depth knowledge of specific sub-fields
  - Project planning and execution
  - Quality assurance and testing methodologies

- **Tools & Frameworks**
  - Advanced software applications
  - Specialized frameworks for increased productivity
  - Automation tools for repetitive tasks

- **Projects to Build**
  - Personal portfolio showcasing your abilities
  - Collaborative projects with peers
  - Open source contributions to build reputation

**🔹 Phase 3: Professional Growth (Years 4-6)**
- **Career Progression**
  - Junior to mid-level positions
  - Mentorship opportunities
  - Leading small teams or projects
  - Specializing in high-demand niches

- **Advanced Development**
  - Research and development of new techniques
  - Optimization and efficiency improvements
  - Cross-functional collaboration
  - Problem-solving for complex challenges

**🔹 Phase 4: Leadership & Mastery (Years 6+)**
- **Senior Positions**
  - Team leadership roles
  - Project management
  - Strategy and vision development
  - Mentoring junior professionals

- **Alternative Pathways**
  - Consulting or freelancing
  - Starting your own business
  - Teaching and knowledge sharing
  - Research and innovation

**💰 Compensation & Benefits**
- **Salary Range:** {salary}
- **Work-Life Balance:** Most positions offer flexible hours and remote work possibilities
- **Growth Potential:** High demand across various industries with opportunities for advancement

**🔧 Required Skills**
- **Technical Skills:**
  - Strong foundation in {skill}
  - Proficiency with industry tools and technologies
  - Problem-solving and analytical thinking

- **Soft Skills:**
  - Communication and collaboration
  - Time management
  - Adaptability
  - Attention to detail

**🌐 Industry Outlook**
Demand for {career} professionals keeps growing as organizations prioritize {skill_lower} capabilities. The field offers opportunities in sectors including technology, healthcare, finance, entertainment, and more.

**🚀 Day-to-Day Responsibilities**
- Collaborating with cross-functional teams
- Designing and implementing solutions
- Testing and validating work
- Staying updated on industry trends and best practices
- Communicating progress and results to stakeholders

**📚 Recommended Resources**
- Professional associations and communities
- Industry conferences and workshops
- Online learning platforms (Coursera, Udemy, LinkedIn Learning)
- Books and publications specific to {skill}

**💡 Would you like to know more about any specific aspect of this career roadmap?**"""
