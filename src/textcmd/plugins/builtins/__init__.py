"""Built-in plugins shipped with textcmd."""
