"""Testing helpers – fakes, fixtures and Hypothesis strategies.

``fakes`` has no test-only dependencies; ``fixtures`` needs pytest and
``generators`` needs hypothesis (``pip install "mp-mcf[testing]"``).
"""
