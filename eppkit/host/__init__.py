"""EPP host commands: check, create, info, update and delete."""