from shared_component.cli import main

main()
