"""DataKnobs Validator package.

Composable validation of typed entities: a validator runs every constraint and
nested validator in declaration order and reports all failures as one
aggregated message.

Example:
    ```python
    from dataknobs_validator import NotNullable, Validator

    person_validator = (
        Validator.builder(NotNullable(Person))
        .add_constraint(lambda p: p.age >= 18, "Person must be at least 18 years old")
        .add_constraint(lambda p: bool(p.name), "Person name cannot be null or empty")
        .build()
    )

    result = person_validator.evaluate(Person(name=None, age=15))
    result.message
    # 'Person must be at least 18 years old, Person name cannot be null or empty'
    ```
"""

from dataknobs_validator import predicates
from dataknobs_validator.builder import ValidatorBuilder
from dataknobs_validator.chain import ConstraintChain
from dataknobs_validator.exceptions import (
    ConfigurationError,
    ValidationError,
    ValidatorError,
)
from dataknobs_validator.policy import (
    NULL_ENTITY_MESSAGE,
    NotNullable,
    Nullable,
    NullPolicy,
)
from dataknobs_validator.result import (
    MESSAGE_SEPARATOR,
    EvaluationContext,
    ValidationResult,
)
from dataknobs_validator.steps import ConstraintStep, NestedStep, Step
from dataknobs_validator.validator import Validator

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Validators
    "Validator",
    "ValidatorBuilder",
    "ConstraintChain",
    # Steps
    "Step",
    "ConstraintStep",
    "NestedStep",
    # Policies
    "NullPolicy",
    "Nullable",
    "NotNullable",
    "NULL_ENTITY_MESSAGE",
    # Results
    "ValidationResult",
    "EvaluationContext",
    "MESSAGE_SEPARATOR",
    # Exceptions
    "ValidatorError",
    "ValidationError",
    "ConfigurationError",
    # Predicates
    "predicates",
]
