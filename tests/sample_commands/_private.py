from terminal import command

COMMAND = command(signature="private", description="Never loaded")(lambda: None)
