"""
Plant Match - Personality quiz scoring
"""
import logging
from fractions import Fraction
from typing import List, Dict, Optional
from plant_match_models import (
    AnswerOption, QuizQuestion, QuizResponse, QuizConfig, ExpertSignal,
    PlantProfile, ScoredRecommendation
)
from config import (
    MOCK_PLANT_PROFILES, MOCK_QUIZ_QUESTIONS, EXPERT_SIGNAL,
    DEFAULT_THRESHOLD_RATIO, EXPERT_THRESHOLD_RATIO
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Quiz bank or catalog is inconsistent; fix the configuration, not the request"""


def validate_quiz_config(config: QuizConfig) -> QuizConfig:
    """
    Check a question bank against its plant catalog.

    Raises ConfigurationError when:
    - two catalog entries share a plant key
    - two questions share an id, or two options of one question share a value
    - an option awards points to a plant key missing from the catalog
    - the expert signal names an unknown question or option
    """
    catalog_keys = set()
    for profile in config.catalog:
        if profile.key in catalog_keys:
            raise ConfigurationError(f"Duplicate plant key in catalog: '{profile.key}'")
        catalog_keys.add(profile.key)

    question_ids = set()
    for question in config.questions:
        if question.id in question_ids:
            raise ConfigurationError(f"Duplicate question id: '{question.id}'")
        question_ids.add(question.id)

        option_values = set()
        for option in question.options:
            if option.value in option_values:
                raise ConfigurationError(
                    f"Duplicate option '{option.value}' in question '{question.id}'"
                )
            option_values.add(option.value)

            unknown = sorted(set(option.points) - catalog_keys)
            if unknown:
                raise ConfigurationError(
                    f"Option '{option.value}' of question '{question.id}' awards points "
                    f"to unknown plant key(s): {', '.join(unknown)}"
                )

    signal = config.expert_signal
    if signal is not None:
        question = next((q for q in config.questions if q.id == signal.question_id), None)
        if question is None:
            raise ConfigurationError(f"Expert signal references unknown question '{signal.question_id}'")
        if question.get_option(signal.option_value) is None:
            raise ConfigurationError(
                f"Expert signal references unknown option '{signal.option_value}' "
                f"of question '{signal.question_id}'"
            )

    logger.info(
        f"Quiz configuration valid: {len(config.questions)} questions, {len(config.catalog)} plants"
    )
    return config


def load_default_quiz_config() -> QuizConfig:
    """Build and validate the quiz configuration from the bundled mock data"""
    catalog = [PlantProfile(key=key, **data) for key, data in MOCK_PLANT_PROFILES.items()]
    questions = [QuizQuestion(**question) for question in MOCK_QUIZ_QUESTIONS]
    question_id, option_value = EXPERT_SIGNAL
    config = QuizConfig(
        questions=questions,
        catalog=catalog,
        expert_signal=ExpertSignal(question_id=question_id, option_value=option_value),
    )
    return validate_quiz_config(config)


def is_expert(response: QuizResponse, signal: Optional[ExpertSignal]) -> bool:
    """Whether the response contains the answer that marks an experienced user"""
    if signal is None:
        return False
    answer = response.answers.get(signal.question_id)
    return answer is not None and answer.value == signal.option_value


def _match_percentage(score: int, highest_score: int) -> int:
    # round(100 * score / highest), half-up, in integer arithmetic
    return (200 * score + highest_score) // (2 * highest_score)


def score(
    response: QuizResponse,
    catalog: List[PlantProfile],
    expert_signal: Optional[ExpertSignal] = None,
) -> List[ScoredRecommendation]:
    """
    Rank plant profiles for a completed quiz.

    Scoring rules:
    1. Every catalog plant starts at 0
    2. Each answered question adds its option's points to the plants it names
    3. If no plant scored, nothing is recommended
    4. Keep plants scoring at least 70% of the top score (50% for experts)
    5. Sort by score descending, then plant key ascending
    6. match_percentage = round(100 * score / top score)

    The first element, if any, is the primary recommendation and always has
    match_percentage 100.
    """
    profiles: Dict[str, PlantProfile] = {profile.key: profile for profile in catalog}
    scores: Dict[str, int] = {key: 0 for key in profiles}

    for question_id, answer in response.answers.items():
        for plant_key, points in answer.points.items():
            if plant_key not in scores:
                raise ConfigurationError(
                    f"Answer to '{question_id}' awards points to unknown plant key '{plant_key}'"
                )
            scores[plant_key] += points

    highest_score = max(scores.values(), default=0)
    if highest_score == 0:
        logger.info(f"No plant scored above zero across {len(response.answers)} answers")
        return []

    expert = is_expert(response, expert_signal)
    ratio = Fraction(str(EXPERT_THRESHOLD_RATIO if expert else DEFAULT_THRESHOLD_RATIO))
    threshold = ratio * highest_score

    kept = [key for key, value in scores.items() if value >= threshold]
    kept.sort(key=lambda key: (-scores[key], key))

    recommendations = [
        ScoredRecommendation(
            profile=profiles[key],
            score=scores[key],
            match_percentage=_match_percentage(scores[key], highest_score),
        )
        for key in kept
    ]

    logger.info(
        f"Scored {len(response.answers)} answers: top={highest_score}, "
        f"threshold={float(threshold):.2f} (expert={expert}), kept {len(recommendations)} of {len(scores)}"
    )
    return recommendations


class PlantMatchEngine:
    """Quiz session helper bound to a validated question bank and catalog"""

    def __init__(self, config: Optional[QuizConfig] = None):
        if config is None:
            self.config = load_default_quiz_config()
        else:
            self.config = validate_quiz_config(config)
        self._questions: Dict[str, QuizQuestion] = {q.id: q for q in self.config.questions}

    @property
    def questions(self) -> List[QuizQuestion]:
        return self.config.questions

    @property
    def catalog(self) -> List[PlantProfile]:
        return self.config.catalog

    def get_option(self, question_id: str, option_value: str) -> AnswerOption:
        question = self._questions.get(question_id)
        if question is None:
            raise KeyError(f"Unknown question '{question_id}'")
        option = question.get_option(option_value)
        if option is None:
            raise KeyError(f"Unknown option '{option_value}' for question '{question_id}'")
        return option

    def answer(self, response: QuizResponse, question_id: str, option_value: str) -> QuizResponse:
        """Record (or replace) the answer to one question"""
        return response.with_answer(question_id, self.get_option(question_id, option_value))

    def build_response(self, answers: Dict[str, str]) -> QuizResponse:
        """Build a response from a question id -> option value mapping"""
        response = QuizResponse()
        for question_id, option_value in answers.items():
            response = self.answer(response, question_id, option_value)
        return response

    def score(self, response: QuizResponse) -> List[ScoredRecommendation]:
        return score(response, self.config.catalog, self.config.expert_signal)

    def primary_recommendation(self, response: QuizResponse) -> Optional[ScoredRecommendation]:
        recommendations = self.score(response)
        return recommendations[0] if recommendations else None
