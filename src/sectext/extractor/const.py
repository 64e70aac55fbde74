import re


# "<digits><optional uppercase letters>. " at the start of a fragment,
# e.g. "10. ", "115BAC. ". Subsection markers like "(1)" never match.
BOUNDARY_CANDIDATE_PATTERN = re.compile(
    r'^\s*([0-9]+)([A-Z]*)\.\s+'
)
START_ANCHOR_TEMPLATE = r'^\s*{identifier}\.\s+'
IDENTIFIER_KEY_PATTERN = re.compile(
    r'^\s*([0-9]+)([A-Z]*)\s*$', re.IGNORECASE
)

SAFETY_CEILING = 50_000
FRAGMENT_SEPARATOR = " "
