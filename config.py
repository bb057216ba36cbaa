"""
Configuration settings for the vector-space paragraph search engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

# Default input files
DEFAULT_COLLECTION_FILE = "collection-100.txt"  # One paragraph per blank-line-delimited block
DEFAULT_QUERY_FILE = "query-10.txt"  # One query per line

# Text processing settings
LOWERCASE = False  # Terms are case-sensitive as given
MIN_PARAGRAPH_CHARS = 1  # Minimum characters for a paragraph to become a document
DELIMITERS = " !\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"  # Token boundaries (whitespace always splits)

# Term filtering settings
MIN_TERM_LENGTH = 3  # Terms must be strictly longer than this after suffix stripping
STRIP_SUFFIX = "s"  # Single trailing suffix removed from every token

# Stopwords are matched case-sensitively against the raw token (documents only)
STOPWORDS = frozenset("""
a about above after again against all also although always am among an and
another any anybody anyone anything anywhere are around as at be became
because become becomes been before being below between both but by can
cannot could did do does doing done down during each either else enough
even ever every everybody everyone everything everywhere few for from
further had has have having he her here hers herself him himself his how
however i if in into is it its itself just least less like made make many
may me might mine more most much must my myself neither never nevertheless
no nobody none nor not nothing now of off often on once one only onto or
other others otherwise our ours ourselves out over own per perhaps rather
said same several shall she should since so some somebody someone something
sometimes somewhere still such than that the their theirs them themselves
then there thereafter therefore these they this those though through thus
to together too toward towards under until up upon us very via was we well
were what whatever when whenever where whereas wherever whether which while
who whoever whole whom whose why will with within without would yet you
your yours yourself yourselves
""".split())

# Search settings
TOP_K_RESULTS = 3  # Number of documents reported per query
TOP_KEYWORDS = 5  # Number of highest-weighted keywords reported per document

# Auto-correction settings
AUTO_CORRECT_ENABLED = False  # Replace unknown query terms with the closest dictionary term
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for auto-correction

# Output settings
VERBOSE = True  # Print progress messages while building
OUTER_RULE_WIDTH = 60  # Width of the rule printed between queries
INNER_RULE_WIDTH = 50  # Width of the rule printed between results

# Debug settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
