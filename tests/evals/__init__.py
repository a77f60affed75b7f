"""
EVALs Suite for quantdots - Tests Designed to Break the Layout Pipeline

Philosophy:
    These tests push the library to its edges: one or two dots, ties,
    extreme distribution parameters, huge dot counts.
    - A failing eval = discovered weakness
    - Use pytest.mark.xfail for known limitations
    - Track which evals start passing after fixes

Run tests:
    pytest tests/evals/ -v                    # Run all evals
    pytest tests/evals/ --tb=no -q           # Quick summary of failures
    pytest tests/ --ignore=tests/evals/      # Run regular tests only
"""
