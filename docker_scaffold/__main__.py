from docker_scaffold.cli import main

main()
