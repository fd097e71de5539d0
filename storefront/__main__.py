from storefront.app import main

main()
