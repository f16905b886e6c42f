#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: errors.py
# Author: Wadih Khairallah
# Description: Exception types raised by the analysis engine and its host
# Created: 2026-10-12 10:02:11
# Modified: 2026-10-17 11:48:03

TEXT_ANALYSIS_ERROR = "TEXT_ANALYSIS_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
WORD_ANALYSIS_ERROR = "WORD_ANALYSIS_ERROR"


class WordAnalysisError(Exception):
    """Base error. `code` groups failures the way callers report them."""

    code = WORD_ANALYSIS_ERROR

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class InputTooLargeError(WordAnalysisError):
    code = TEXT_ANALYSIS_ERROR


class InvalidOptionsError(WordAnalysisError, ValueError):
    code = VALIDATION_ERROR


class AnalysisFailedError(WordAnalysisError):
    code = TEXT_ANALYSIS_ERROR


class SourceError(WordAnalysisError):
    """Input could not be read or fetched."""


class ConfigError(WordAnalysisError, ValueError):
    code = VALIDATION_ERROR
