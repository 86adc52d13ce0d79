import logging

from .dictionary import DictionaryIndex as DictionaryIndex
from .dictionary import load_dictionary as load_dictionary
from .occurrences import Occurrences as Occurrences
from .occurrences import PreconditionViolation as PreconditionViolation
from .occurrences import combinations as combinations
from .occurrences import merge as merge
from .occurrences import sentence_occurrences as sentence_occurrences
from .occurrences import subtract as subtract
from .occurrences import word_occurrences as word_occurrences
from .solver import Solver as Solver
from .solver import sentence_anagrams as sentence_anagrams

logging.basicConfig(
    format="[%(asctime)s] %(message)s",
    level=logging.INFO,
)
logging.captureWarnings(capture=True)
logger = logging.getLogger(__name__)
