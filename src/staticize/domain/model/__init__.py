"""Domain model entities."""

from staticize.domain.model.configuration import PromotionConfig
from staticize.domain.model.scope import ClassScope, MethodRecord
from staticize.domain.model.tree import (
    Annotation,
    ClassDeclaration,
    ClassKind,
    CompilationUnit,
    Identifier,
    MethodDeclaration,
    Modifier,
    Modifiers,
    Node,
    Token,
    Tree,
    VariableDeclarations,
)
from staticize.domain.model.verdict import (
    ClassReport,
    IneligibilityReason,
    MethodState,
    MethodUsage,
    PromotionResult,
    Verdict,
)

__all__ = [
    # Tree
    "Annotation",
    "ClassDeclaration",
    "ClassKind",
    "CompilationUnit",
    "Identifier",
    "MethodDeclaration",
    "Modifier",
    "Modifiers",
    "Node",
    "Token",
    "Tree",
    "VariableDeclarations",
    # Scope
    "ClassScope",
    "MethodRecord",
    # Results
    "ClassReport",
    "IneligibilityReason",
    "MethodState",
    "MethodUsage",
    "PromotionResult",
    "Verdict",
    # Configuration
    "PromotionConfig",
]
