from path_to_regex.cli import main

main()
