"""shadcn/ui components available in the generated component's sandbox."""

from models import ComponentDoc

SHADCN_DOCS: list[ComponentDoc] = [
    ComponentDoc(
        name="Avatar",
        import_docs='import { Avatar, AvatarFallback, AvatarImage } from "/components/ui/avatar"',
        usage_docs="""<Avatar>
  <AvatarImage src="https://github.com/shadcn.png" />
  <AvatarFallback>CN</AvatarFallback>
</Avatar>""",
    ),
    ComponentDoc(
        name="Button",
        import_docs='import { Button } from "/components/ui/button"',
        usage_docs="""<Button>A normal button</Button>
<Button variant="secondary">Button</Button>
<Button variant="destructive">Button</Button>
<Button variant="outline">Button</Button>
<Button variant="ghost">Button</Button>
<Button variant="link">Button</Button>""",
    ),
    ComponentDoc(
        name="Card",
        import_docs="""import {
  Card,
  CardContent,
  CardDescription,
  CardFooter,
  CardHeader,
  CardTitle,
} from "/components/ui/card\"""",
        usage_docs="""<Card>
  <CardHeader>
    <CardTitle>Card Title</CardTitle>
    <CardDescription>Card Description</CardDescription>
  </CardHeader>
  <CardContent>
    <p>Card Content</p>
  </CardContent>
  <CardFooter>
    <p>Card Footer</p>
  </CardFooter>
</Card>""",
    ),
    ComponentDoc(
        name="Checkbox",
        import_docs='import { Checkbox } from "/components/ui/checkbox"',
        usage_docs="<Checkbox />",
    ),
    ComponentDoc(
        name="Input",
        import_docs='import { Input } from "/components/ui/input"',
        usage_docs='<Input />',
    ),
    ComponentDoc(
        name="Label",
        import_docs='import { Label } from "/components/ui/label"',
        usage_docs='<Label htmlFor="email">Your email address</Label>',
    ),
    ComponentDoc(
        name="RadioGroup",
        import_docs="""import { Label } from "/components/ui/label"
import { RadioGroup, RadioGroupItem } from "/components/ui/radio-group\"""",
        usage_docs="""<RadioGroup defaultValue="option-one">
  <div className="flex items-center space-x-2">
    <RadioGroupItem value="option-one" id="option-one" />
    <Label htmlFor="option-one">Option One</Label>
  </div>
  <div className="flex items-center space-x-2">
    <RadioGroupItem value="option-two" id="option-two" />
    <Label htmlFor="option-two">Option Two</Label>
  </div>
</RadioGroup>""",
    ),
    ComponentDoc(
        name="Select",
        import_docs="""import {
  Select,
  SelectContent,
  SelectItem,
  SelectTrigger,
  SelectValue,
} from "/components/ui/select\"""",
        usage_docs="""<Select>
  <SelectTrigger className="w-[180px]">
    <SelectValue placeholder="Theme" />
  </SelectTrigger>
  <SelectContent>
    <SelectItem value="light">Light</SelectItem>
    <SelectItem value="dark">Dark</SelectItem>
    <SelectItem value="system">System</SelectItem>
  </SelectContent>
</Select>""",
    ),
    ComponentDoc(
        name="Textarea",
        import_docs='import { Textarea } from "/components/ui/textarea"',
        usage_docs="<Textarea />",
    ),
    ComponentDoc(
        name="Badge",
        import_docs='import { Badge } from "/components/ui/badge"',
        usage_docs="""<Badge>Badge</Badge>
<Badge variant="secondary">Secondary</Badge>
<Badge variant="outline">Outline</Badge>""",
    ),
    ComponentDoc(
        name="Progress",
        import_docs='import { Progress } from "/components/ui/progress"',
        usage_docs="<Progress value={33} />",
    ),
    ComponentDoc(
        name="Tabs",
        import_docs='import { Tabs, TabsContent, TabsList, TabsTrigger } from "/components/ui/tabs"',
        usage_docs="""<Tabs defaultValue="account" className="w-[400px]">
  <TabsList>
    <TabsTrigger value="account">Account</TabsTrigger>
    <TabsTrigger value="password">Password</TabsTrigger>
  </TabsList>
  <TabsContent value="account">Make changes to your account here.</TabsContent>
  <TabsContent value="password">Change your password here.</TabsContent>
</Tabs>""",
    ),
]
