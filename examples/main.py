import logging

from arithtree import (
    BinaryOperation,
    CopyTransformer,
    EvaluationSettings,
    Evaluator,
    FunctionCall,
    InfixCompiler,
    Number,
    Variable,
    make_json_event_logger,
)

def main():
    """
    Example usage of the expression tree: evaluate, copy and render.
    """
    expression = FunctionCall(
        "abs",
        BinaryOperation(
            Variable("var", 10.0),
            "*",
            FunctionCall("sqrt", BinaryOperation(Number(32.0), "-", Number(16.0))),
        ),
    )
    print(f"Result: {expression.evaluate()}")

    copied = expression.transform(CopyTransformer())
    print(f"New Result: {copied.evaluate()}")
    print(f"Rendered: {InfixCompiler().compile(copied).text}")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    evaluator = Evaluator(
        EvaluationSettings(event_observer=make_json_event_logger(logger=logging.getLogger("arithtree.example")))
    )
    evaluator.evaluate(BinaryOperation(Number(1.0), "/", Number(0.0)))

if __name__ == "__main__":
    main()
