"""Game systems built on the core engine.

- entities/: the Player entity
- roster.py: name-keyed player store
- validators.py: setup field validation
- setup_loader.py: team and player setup phase
- command_interpreter.py: command parsing and dispatch
- outcome_evaluator.py: winner determination
- line_io.py: line source and sink
- log_manager.py: categorized game log
- config_loader.py: YAML run configuration
- game.py: run orchestration
"""
