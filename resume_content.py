"""
Resume blueprint content.

Separating the canned analysis text from the analyzer keeps the matching
logic clean and makes it easy to iterate on the wording without touching
application code.

FALLBACK_DREAM_JOB   — role phrase used when the user leaves "dream job" blank.
FOUND_SKILLS         — skills the diagnostic reports as present.
WEAK_PHRASES         — phrases the diagnostic flags for rewording.
SUGGESTIONS          — ordered improvement tips returned with every analysis.
RESUME_HEADER / RESUME_SUMMARY_TEMPLATE / RESUME_EXPERIENCE / RESUME_SKILLS
                     — the improved-resume template; only the summary is
                       interpolated (with {dream_job}).
"""

FALLBACK_DREAM_JOB = "a top professional role"

# ---------------------------------------------------------------------------
# Diagnostic values
# ---------------------------------------------------------------------------

FOUND_SKILLS: tuple[str, ...] = ("javascript", "react")

WEAK_PHRASES: tuple[str, ...] = ("Responsible for",)

QUANTIFICATION_NEEDED = True

# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------

SUGGESTIONS: tuple[str, ...] = (
    "ATS Keyword Optimization: Your resume should include keywords from the job "
    "description. For a 'Software Engineer' role, add terms like 'API', 'backend', "
    "'frontend', 'testing', and specific frameworks.",

    "Use Action Verbs: Replace passive phrases like 'responsible for' with powerful "
    "action verbs like 'Engineered', 'Architected', 'Developed', 'Optimized', or 'Managed'.",

    "Quantify Achievements: Instead of saying you 'improved performance', say you "
    "'Optimized database queries, resulting in a 30% reduction in page load time'. "
    "Numbers make your impact clear.",

    "Employ the STAR Method: Structure your experience bullet points using the "
    "Situation, Task, Action, Result (STAR) method to create compelling stories of "
    "your accomplishments.",

    "File Format: Always submit your resume as a PDF file to preserve formatting, "
    "unless the application specifically requests a .docx file.",
)

# ---------------------------------------------------------------------------
# Improved resume template
# ---------------------------------------------------------------------------

RESUME_HEADER = (
    "Firstname Lastname\n"
    "(123) 456-780 | professional.email@example.com | linkedin.com/in/yourprofile"
)

RESUME_SUMMARY_TEMPLATE = (
    "A results-driven professional with skills in JavaScript and React. "
    "Seeking to leverage these abilities in a {dream_job} role to build and "
    "optimize impactful software solutions."
)

RESUME_EXPERIENCE: tuple[str, ...] = (
    "Engineered a full-stack e-commerce platform using the MERN stack, resulting "
    "in a 15% increase in user engagement.",
    "Developed and integrated a RESTful API for payment processing, handling over "
    "1,000 transactions per day.",
)

RESUME_SKILLS = (
    "Technical Skills: JavaScript (ES6+), React, Node.js, Express, MongoDB\n"
    "Soft Skills: Agile Methodologies, Problem-Solving, Team Collaboration"
)
