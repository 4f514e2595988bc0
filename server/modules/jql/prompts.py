"""System instruction sent with every translation request."""

JQL_OPERATORS = ("AND", "OR", "NOT")

JQL_FIELDS = (
    "project",
    "status",
    "priority",
    "assignee",
    "reporter",
    "issuetype",
    "resolution",
    "created",
    "updated",
)


def build_system_instruction() -> str:
    """
    Build the JQL system instruction.

    Returns:
        Instruction telling the model to answer with one bare JQL expression.
    """
    operators = ", ".join(f"'{op}'" for op in JQL_OPERATORS)
    fields = ", ".join(f"'{field}'" for field in JQL_FIELDS)
    return (
        "You are a JQL expert. Your only task is to translate a text description "
        "into a single, valid JQL string. Never add any explanations, preamble, "
        "Markdown formatting (e.g. ```jql) or other text. Return only plain JQL code. "
        f"Use the operators {operators} and fields such as {fields}."
    )


JQL_SYSTEM_INSTRUCTION = build_system_instruction()
