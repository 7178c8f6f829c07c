"""
Game Configuration Constants Module

This module defines all game configuration constants following the
Single Responsibility Principle and Configuration Management best practices.
All game parameters are centralized here to enable easy modification

"""

import json
import os
from typing import Final, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every answer and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ROUNDS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load the candidate word list from a JSON file.

    Args:
        path: JSON file holding an array of words (defaults to words.json)
        word_length: Required length of every word

    Returns:
        List[str]: List of uppercase words, in file order

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, or the list is empty or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    # Convert all words to uppercase and validate
    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not words:
        raise ValueError("Word list cannot be empty")

    # Validate each word meets game requirements
    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    # Validate uniqueness (no duplicates)
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        validate_word_list_integrity(WORD_LIST)
        print(f" Word list validation passed ({len(WORD_LIST)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
