CV_POLISH_PROMPT = (
    "You are a professional HR reviewer. Review the text of this CV. "
    "Give feedback in JSON format: "
    "{\"rewritten_section\": \"(Rewrite the 'Work Experience' or 'About Me' section as one short, "
    "professional paragraph)\", "
    "\"improvement_points\": [\"(Improvement 1)\", \"(Improvement 2)\"], "
    "\"critique\": [\"(Critique 1)\", \"(Critique 2)\"], "
    "\"ats_score\": 85}"
)

JOB_SCOUT_PROMPT = (
    "You are an AI job hunter. Analyze the text of this CV and give the 5 most relevant "
    "JobStreet or LinkedIn search links. Respond ONLY with JSON: "
    "[{\"portal_name\": \"JobStreet\", \"search_link\": \"https://...\"}, ...]"
)

DEFAULT_ANALYSIS_TEMPLATE = "polish"

ANALYSIS_TEMPLATES = {
    "polish": CV_POLISH_PROMPT,
    "job-scout": JOB_SCOUT_PROMPT,
}

CV_TEXT_HEADER = "Here is the CV text:"
