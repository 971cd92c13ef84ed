from concept.cli import run

run()
