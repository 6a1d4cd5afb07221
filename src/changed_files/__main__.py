from changed_files.cli.main import entrypoint

entrypoint()
