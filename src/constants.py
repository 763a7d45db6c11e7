PROMPT_SUFFIX = " > "

VERBS = ("pwd", "cd", "ls", "mkdir", "rmdir", "touch", "rm", "cat", "mv", "help", "exit")

# Commands allowed on each side of '>', '>>' and '|'
REDIRECT_SOURCES = frozenset({"pwd", "ls"})
PIPE_SOURCES = frozenset({"pwd", "ls"})
PIPE_TARGETS = frozenset({"cat"})

WELCOME = "Welcome to the CLI. Type 'help' to see available commands."
FAREWELL = "Exiting CLI. Goodbye!"

HELP_TEXT = """Available Commands:
pwd - Print working directory
cd <directory> - Change directory
ls - List directory contents
mkdir <name> - Create directory
rmdir <name> - Remove directory
touch <name> - Create file
rm <name> - Remove file
cat <name> - Display file contents
mv <source> <destination> - Move or rename a file or directory
> <file> - Redirect output to a file (overwrite)
>> <file> - Redirect output to a file (append)
| - Pipe the output of one command to another
exit - Exit the CLI
help - Display this help message
"""
